# (c) Copyright IBM Corp. 2025

"""
Validation of a candidate port: does it answer the language server's private API?
"""

import json
from typing import Optional

import requests
import urllib3

from lsfinder.log import logger
from lsfinder.options import DiscoveryOptions

# The language server serves a self-signed certificate on the loopback interface.
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class EndpointProbe(object):
    """
    Issues one authenticated request to a candidate port and tells whether the
    language server API answered it.
    """

    HOST = "127.0.0.1"
    PROBE_PATH = "/exa.language_server_pb.LanguageServerService/GetUnleashData"
    CSRF_HEADER = "X-Codeium-Csrf-Token"
    PROTOCOL_VERSION_HEADER = "Connect-Protocol-Version"
    PROTOCOL_VERSION = "1"

    def __init__(self, options: Optional[DiscoveryOptions] = None) -> None:
        self.options = options if options is not None else DiscoveryOptions()

    def probe_url(self, port: int) -> str:
        return f"https://{self.HOST}:{port}{self.PROBE_PATH}"

    def is_valid(self, port: int, auth_token: str) -> bool:
        """
        Check if the language server API is listening on <port>.

        A fresh session is used for every probe and closed before returning,
        whatever the outcome.
        @return: Boolean
        """
        try:
            with requests.Session() as session:
                response = session.post(
                    self.probe_url(port),
                    json={"wrapper_data": {}},
                    headers={
                        "Content-Type": "application/json",
                        self.CSRF_HEADER: auth_token,
                        self.PROTOCOL_VERSION_HEADER: self.PROTOCOL_VERSION,
                    },
                    verify=False,
                    timeout=self.options.probe_timeout,
                )
                try:
                    status_code = response.status_code
                    content = response.content
                finally:
                    response.close()
        except requests.exceptions.Timeout:
            logger.debug(f"probe: port {port} timed out after {self.options.probe_timeout}s")
            return False
        except Exception as exc:
            logger.debug(f"probe: connection error on port {port} ({type(exc)})")
            return False

        if status_code != 200:
            logger.debug(
                f"probe: response status code ({status_code}) on port {port} is NOT 200"
            )
            return False

        if isinstance(content, bytes):
            raw_json = content.decode("UTF-8", errors="replace")
        else:
            raw_json = content

        try:
            json.loads(raw_json)
        except (json.JSONDecodeError, TypeError):
            logger.debug(f"probe: response on port {port} is not JSON: ({raw_json})")
            return False

        logger.debug(f"probe: language server API found on port {port}")
        return True

# coding: utf-8
# (c) Copyright IBM Corp. 2025

from os import path

from setuptools import find_packages, setup

pwd = path.abspath(path.dirname(__file__))

# Read the version without importing the package
version = {}
with open(path.join(pwd, "src", "lsfinder", "version.py"), encoding="utf-8") as f:
    exec(f.read(), version)

# Import README.md into long_description
with open(path.join(pwd, "README.md"), encoding="utf-8") as f:
    long_description = f.read()


setup(name="lsfinder",
      version=version["VERSION"],
      license="MIT",
      description="Discovery of the locally running Antigravity language server and its API port",
      package_dir={"": "src"},
      packages=find_packages("src", exclude=["tests"]),
      long_description=long_description,
      long_description_content_type="text/markdown",
      zip_safe=False,
      python_requires=">=3.8",
      install_requires=["fysom>=2.1.2",
                        "PyYAML>=6.0",
                        "requests>=2.6.0",
                        "urllib3>=1.26.5"],
      extras_require={
          "test": ["mock>=4.0",
                   "pytest>=7.0",
                   "pytest-mock>=3.10"],
      },
      entry_points={
          "console_scripts": ["lsfinder = lsfinder.__main__:main"],
      },
      keywords=["language-server", "process-discovery", "antigravity"],
      classifiers=[
          "Development Status :: 5 - Production/Stable",
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Operating System :: Microsoft :: Windows",
          "Operating System :: MacOS",
          "Operating System :: POSIX :: Linux",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Software Development :: Libraries :: Python Modules"])

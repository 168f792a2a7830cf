[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wsmanxml"
version = "0.1.0"
description = "Build and parse XML documents and SOAP/WS-Management messages for PowerShell remoting"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "xml-builder", "soap", "ws-management", "wsman", "powershell-remoting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wsmanxml-demo = "wsmanxml.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wsmanxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

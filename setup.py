from setuptools import setup
from setuptools import find_packages

# PEP0440 compatible formatted version, see:
# https://www.python.org/dev/peps/pep-0440/

#   X.Y.0   # For first release after an increment in Y
#   X.Y.Z   # For bugfix releases

setup(
    name="menagerie",
    version="0.1.0",
    packages=find_packages(include=["menagerie", "menagerie.*"]),
    install_requires=["colorama"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "menagerie-basic = menagerie.programs.cli:basic",
            "menagerie-helper = menagerie.programs.cli:with_helper",
            "menagerie-interface = menagerie.programs.cli:interface",
        ]
    },
    long_description=open("README.md").read(),
)

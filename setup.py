import os
import setuptools
import subprocess
import sys


def shell_command(command, short_description):
    """Create a simple command that is invoked using subprocess."""

    class ShellCommand(setuptools.Command):
        """Run custom script when invoked."""

        description = short_description
        user_options = []

        def initialize_options(self):
            pass

        def finalize_options(self):
            pass

        def run(self):
            subprocess.call(command)

    return ShellCommand


def unittest_command(suite):
    """Get new command for unittest suite."""

    return [
        sys.executable,
        "-m",
        "unittest",
        "discover",
        "-v",
        "-s",
        suite,
        "-p",
        "*_test.py"
    ]

LICENSE = "Apache-2.0"
MAINTAINER = ['Alex Huszagh']
MAINTAINER_EMAIL = ['ahuszagh@gmail.com']
NAME = "tweetboard"
URL = "https://github.com/Alexhuszagh/tweetboard.git"
VERSION = "0.0.1"

DESCRIPTION = "Filtered real-time Twitter stream with client-side filtering."
LONG_DESCRIPTION = """Follow keywords on Twitter in real-time.
Tweetboard opens a filtered stream, drops Tweets from blocked users or with
blocked words, and hands simplified Tweets to a single callback.
"""

PACKAGES = setuptools.find_packages(exclude=["tests"])
HOME = os.path.dirname(os.path.realpath(__file__))
with open(os.path.join(HOME, 'requirements.txt')) as f:
    REQUIRES = f.read().splitlines()
COMMANDS = {
    'test': shell_command(
        command=unittest_command("tests"),
        short_description="Run unittest suite."
    ),
}

setuptools.setup(
    install_requires=REQUIRES,
    python_requires=">=3.7",
    packages=PACKAGES,
    cmdclass=COMMANDS,
    zip_safe=False,
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    url=URL,
    license=LICENSE,
)

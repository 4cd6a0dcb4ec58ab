from importlib.metadata import version

import vies


def test__version() -> None:
    assert vies.__version__ == version("vies-client")

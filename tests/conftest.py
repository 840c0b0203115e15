#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from ppcolor.kinds import Kind, register_kind, unregister_kind


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def register():
    """Register Kind adapters for a test and remove them afterwards."""
    registered: list[type] = []

    def _register(cls: type, kind: Kind) -> type:
        register_kind(cls, kind)
        registered.append(cls)
        return cls

    yield _register

    for cls in registered:
        unregister_kind(cls)

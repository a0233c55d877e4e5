"""Root pytest fixtures for errcode-python tests."""

from __future__ import annotations

import pytest

from errcode_python.errors import GeneralError, new_general_error


@pytest.fixture(scope="session")
def general_error() -> GeneralError:
    """Root error built from the label 'general error'."""
    return new_general_error("general error").make()


@pytest.fixture(scope="session")
def descendant(general_error: GeneralError) -> GeneralError:
    """Direct subtype of the general error."""
    return general_error.produce().sub_type("descendant of general error").make()


@pytest.fixture(scope="session")
def external_error() -> ValueError:
    """A foreign error to attach to error nodes."""
    return ValueError("some error")


@pytest.fixture
def chain() -> list[GeneralError]:
    """Root and three generations of subtypes: root -> once -> told -> me."""
    root = new_general_error("Somebody").make()
    once = root.produce().sub_type("Once").make()
    told = once.produce().sub_type("Told").make()
    me = told.produce().sub_type("Me").make()
    return [root, once, told, me]

"""Tests configurations and fixtures."""

import pytest

from testoria.identifiers import SequentialIdentifier
from testoria.manager import TestModelManager
from testoria.schema import Element, ElementType


@pytest.fixture
def login_button() -> Element:
    """Provide a button element."""
    return Element(name='Log in', id='login_button', type=ElementType.BUTTON)


@pytest.fixture
def welcome_view() -> Element:
    """Provide a view element."""
    return Element(name='Welcome', id='welcome_view', type=ElementType.VIEW)


@pytest.fixture
def manager(login_button: Element, welcome_view: Element) -> TestModelManager:
    """Provide a manager with deterministic identifiers.

    Identifiers are produced as `id_1`, `id_2`, ... in call order and
    the catalog holds the button and the view elements.
    """
    return TestModelManager(
        SequentialIdentifier(),
        [login_button, welcome_view],
    )


@pytest.fixture
def catalog_content() -> str:
    """Provide a valid element catalog document."""
    return (
        '- name: Log in\n'
        '  id: login_button\n'
        '  type: button\n'
        '- name: Welcome\n'
        '  id: welcome_view\n'
        '  type: view\n'
    )

"""Tests for suite operations of the test model manager."""

import pytest

from testoria.errors import RecurringSuiteName, SuiteNotFound
from testoria.identifiers import SequentialIdentifier
from testoria.manager import TestModelManager
from testoria.schema import Element, Suite, SuiteId


def test_add_suite(manager: TestModelManager) -> None:
    """Create a suite with a generated identity."""
    suite_id = manager.add_suite('Home screen')

    assert suite_id == SuiteId(value='id_1')
    assert manager.build_suites() == [
        Suite(id=SuiteId(value='id_1'), name='Home screen'),
    ]


def test_add_multiple_suites(manager: TestModelManager) -> None:
    """Keep suites in creation order with distinct identities."""
    first = manager.add_suite('Home screen')
    second = manager.add_suite('Log in screen')

    assert first == SuiteId(value='id_1')
    assert second == SuiteId(value='id_2')
    assert [suite.name for suite in manager.build_suites()] == [
        'Home screen',
        'Log in screen',
    ]


def test_add_suite_with_recurring_name(manager: TestModelManager) -> None:
    """Reject a suite name already in use and keep state unchanged."""
    manager.add_suite('Home screen')
    before = manager.build_suites()

    with pytest.raises(RecurringSuiteName) as error:
        manager.add_suite('Home screen')

    assert error.value == RecurringSuiteName('Home screen')
    assert error.value.name == 'Home screen'
    assert manager.build_suites() == before


def test_recurring_name_does_not_consume_identifier(manager: TestModelManager) -> None:
    """Check names before asking the supplier for an identifier."""
    manager.add_suite('Home screen')

    with pytest.raises(RecurringSuiteName):
        manager.add_suite('Home screen')

    assert manager.add_suite('Log in screen') == SuiteId(value='id_2')


@pytest.mark.parametrize('name, other', (
    pytest.param('Home screen', 'home screen', id='case sensitive'),
    pytest.param('Home screen', 'Home screen ', id='trailing space'),
    pytest.param('', 'Home screen', id='empty name'),
))
def test_suite_names_match_exactly(manager: TestModelManager, name: str, other: str) -> None:
    """Compare suite names by exact match only."""
    manager.add_suite(name)
    manager.add_suite(other)

    assert len(manager.build_suites()) == 2


def test_rename_suite(manager: TestModelManager) -> None:
    """Rename a suite without moving it."""
    manager.add_suite('Home screen')
    suite_id = manager.add_suite('Log in screen')
    manager.add_suite('Settings screen')

    manager.rename_suite('Sign in screen', suite_id)

    assert [suite.name for suite in manager.build_suites()] == [
        'Home screen',
        'Sign in screen',
        'Settings screen',
    ]


def test_rename_suite_allows_recurring_name(manager: TestModelManager) -> None:
    """Skip the uniqueness check on rename."""
    manager.add_suite('Home screen')
    suite_id = manager.add_suite('Log in screen')

    manager.rename_suite('Home screen', suite_id)

    assert [suite.name for suite in manager.build_suites()] == [
        'Home screen',
        'Home screen',
    ]


def test_rename_suite_keeps_scenarios(manager: TestModelManager) -> None:
    """Keep owned scenarios when renaming a suite."""
    suite_id = manager.add_suite('Home screen')
    scenario_id = manager.add_scenario('Show welcome message', suite_id)

    manager.rename_suite('Start screen', suite_id)

    (suite,) = manager.build_suites()
    assert [scenario.id for scenario in suite.scenarios] == [scenario_id]


def test_rename_missing_suite(manager: TestModelManager) -> None:
    """Fail to rename an unknown suite."""
    manager.add_suite('Home screen')

    with pytest.raises(SuiteNotFound) as error:
        manager.rename_suite('Start screen', SuiteId(value='wrongId'))

    assert error.value.suite_id == SuiteId(value='wrongId')
    assert manager.build_suites()[0].name == 'Home screen'


def test_delete_suite(manager: TestModelManager) -> None:
    """Delete a suite keeping the order of the others."""
    first = manager.add_suite('Home screen')
    second = manager.add_suite('Log in screen')
    third = manager.add_suite('Settings screen')

    manager.delete_suite(second)

    assert [suite.id for suite in manager.build_suites()] == [first, third]


def test_delete_suite_cascades(manager: TestModelManager, login_button: Element) -> None:
    """Delete owned scenarios and steps with the suite."""
    suite_id = manager.add_suite('Home screen')
    scenario_id = manager.add_scenario('Show welcome message', suite_id)
    manager.add_step('tap', login_button, scenario_id)

    manager.delete_suite(suite_id)

    assert manager.build_suites() == []


def test_delete_missing_suite(manager: TestModelManager) -> None:
    """Fail to delete an unknown suite."""
    manager.add_suite('Home screen')

    with pytest.raises(SuiteNotFound) as error:
        manager.delete_suite(SuiteId(value='wrongId'))

    assert error.value == SuiteNotFound(SuiteId(value='wrongId'))
    assert len(manager.build_suites()) == 1


def test_delete_suite_twice(manager: TestModelManager) -> None:
    """Fail to delete an already deleted suite."""
    suite_id = manager.add_suite('Home screen')
    manager.delete_suite(suite_id)

    with pytest.raises(SuiteNotFound):
        manager.delete_suite(suite_id)


def test_name_reusable_after_delete(manager: TestModelManager) -> None:
    """Allow a deleted suite name to be used again."""
    suite_id = manager.add_suite('Home screen')
    manager.delete_suite(suite_id)

    assert manager.add_suite('Home screen') == SuiteId(value='id_2')


def test_independent_managers() -> None:
    """Keep state private to each manager instance."""
    first = TestModelManager(SequentialIdentifier())
    second = TestModelManager(SequentialIdentifier())

    first.add_suite('Home screen')
    second.add_suite('Home screen')

    assert len(first.build_suites()) == 1
    assert len(second.build_suites()) == 1

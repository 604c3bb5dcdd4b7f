"""Test model manager.

The manager owns the suite → scenario → step hierarchy and is its sole
mutator. Every operation is a synchronous call that either returns a
generated identity (or nothing) or raises one of the operation errors
from `testoria.errors`. A failed operation never changes state.

Entities are immutable: an update replaces the affected suite value
in the top-level sequence, so snapshots returned by `build_suites`
are never altered by later mutations.

The manager is not thread-safe. Hosts calling it from several threads
must serialize access externally.
"""

import logging
from collections.abc import Callable, Iterable

from testoria.errors import RecurringScenarioName, RecurringSuiteName, ScenarioNotFound, SuiteNotFound
from testoria.identifiers import IdentifierSupplier, uuid_identifier
from testoria.schema import Action, Element, Scenario, ScenarioId, Step, Suite, SuiteId

logger = logging.getLogger(__name__)


class TestModelManager:
    """Owner of the authoring hierarchy.

    Enforces name uniqueness at creation time (suites globally, scenarios
    within their suite), generates identities through the injected
    supplier, and resolves compound scenario identities against the
    owning suite.

    Renames skip the uniqueness check: names are validated
    only when an entity is created.
    """

    __test__ = False

    def __init__(self, generate_id: IdentifierSupplier = uuid_identifier,
                 elements: Iterable[Element] = ()) -> None:
        """Initialize a manager with an empty hierarchy.

        Args:
            generate_id: Supplier of fresh identifiers.
            elements: Read-only element catalog exposed to callers.
        """
        self._suites: list[Suite] = []
        self._elements = tuple(elements)
        self._generate_id = generate_id

    def add_suite(self, name: str) -> SuiteId:
        """Create an empty suite at the end of the suite sequence.

        Args:
            name: Suite name, unique among all suites.

        Returns:
            Identity of the created suite.

        Raises:
            RecurringSuiteName: If a suite with this exact name exists.
        """
        if self._is_suite_existing(name):
            logger.info('Rejected suite "%s": name already in use', name)
            raise RecurringSuiteName(name)

        suite_id = SuiteId(value=self._generate_id())
        self._suites.append(Suite(id=suite_id, name=name))

        logger.debug('Added suite "%s" (%s)', name, suite_id.value)

        return suite_id

    def rename_suite(self, new_name: str, suite_id: SuiteId) -> None:
        """Rename a suite in place.

        Raises:
            SuiteNotFound: If no suite has this identity.
        """
        index = self._require_suite_index(suite_id)
        suite = self._suites[index]

        self._suites[index] = suite.model_copy(update={'name': new_name})

        logger.debug('Renamed suite %s: "%s" -> "%s"', suite_id.value, suite.name, new_name)

    def delete_suite(self, suite_id: SuiteId) -> None:
        """Delete a suite with all its scenarios and steps.

        Raises:
            SuiteNotFound: If no suite has this identity.
        """
        index = self._require_suite_index(suite_id)
        suite = self._suites.pop(index)

        logger.debug('Deleted suite "%s" (%s) with %d scenario(s)',
                     suite.name, suite_id.value, len(suite.scenarios))

    def add_scenario(self, name: str, suite_id: SuiteId) -> ScenarioId:
        """Create an empty scenario at the end of a suite.

        Args:
            name: Scenario name, unique within the suite.
            suite_id: Identity of the owning suite.

        Returns:
            Compound identity of the created scenario.

        Raises:
            SuiteNotFound: If no suite has this identity.
            RecurringScenarioName: If the suite already has a scenario
                with this exact name.
        """
        index = self._require_suite_index(suite_id)
        suite = self._suites[index]

        if any(scenario.name == name for scenario in suite.scenarios):
            logger.info('Rejected scenario "%s" in suite "%s": name already in use',
                        name, suite.name)
            raise RecurringScenarioName(suite.name, name)

        scenario_id = ScenarioId(suite_id=suite.id.value, value=self._generate_id())
        self._suites[index] = suite.model_copy(update={
            'scenarios': (*suite.scenarios, Scenario(id=scenario_id, name=name)),
        })

        logger.debug('Added scenario "%s" (%s) to suite "%s"', name, scenario_id.value, suite.name)

        return scenario_id

    def rename_scenario(self, new_name: str, scenario_id: ScenarioId) -> None:
        """Rename a scenario in place.

        Raises:
            ScenarioNotFound: If either the suite or the scenario half
                of the identity does not resolve.
        """
        def rename(scenario: Scenario) -> Scenario:
            return scenario.model_copy(update={'name': new_name})

        self._replace_scenario(scenario_id, rename)

        logger.debug('Renamed scenario %s to "%s"', scenario_id.value, new_name)

    def delete_scenario(self, scenario_id: ScenarioId) -> None:
        """Delete a scenario, keeping the order of its siblings.

        Raises:
            ScenarioNotFound: If either the suite or the scenario half
                of the identity does not resolve.
        """
        suite_index, scenario_index = self._require_scenario_index(scenario_id)
        suite = self._suites[suite_index]

        scenarios = list(suite.scenarios)
        del scenarios[scenario_index]
        self._suites[suite_index] = suite.model_copy(update={'scenarios': tuple(scenarios)})

        logger.debug('Deleted scenario %s from suite "%s"', scenario_id.value, suite.name)

    def add_step(self, action: Action, element: Element, scenario_id: ScenarioId) -> None:
        """Append a step to a scenario.

        Neither the action nor the element is validated against the
        available sets; callers are expected to source both from
        `get_available_actions` and `get_available_elements`.

        Raises:
            ScenarioNotFound: If either the suite or the scenario half
                of the identity does not resolve.
        """
        def append(scenario: Scenario) -> Scenario:
            step = Step(action=action, element=element)
            return scenario.model_copy(update={'steps': (*scenario.steps, step)})

        self._replace_scenario(scenario_id, append)

        logger.debug('Added step %s on "%s" to scenario %s', action, element.id, scenario_id.value)

    def get_available_actions(self) -> list[Action]:
        """Return every action in declaration order."""
        return list(Action)

    def get_available_elements(self) -> list[Element]:
        """Return the element catalog in the order it was supplied."""
        return list(self._elements)

    def build_suites(self) -> list[Suite]:
        """Return a point-in-time snapshot of the hierarchy.

        Suites are immutable values, so the snapshot stays unchanged
        whatever operations follow.
        """
        return list(self._suites)

    def _is_suite_existing(self, name: str) -> bool:
        return any(suite.name == name for suite in self._suites)

    def _suite_index(self, suite_id: SuiteId) -> int | None:
        for index, suite in enumerate(self._suites):
            if suite.id == suite_id:
                return index
        return None

    def _require_suite_index(self, suite_id: SuiteId) -> int:
        index = self._suite_index(suite_id)
        if index is None:
            logger.info('Suite %s not found', suite_id.value)
            raise SuiteNotFound(suite_id)
        return index

    def _scenario_index(self, scenario_id: ScenarioId) -> tuple[int, int] | None:
        """Resolve a compound identity into suite and scenario positions."""
        suite_index = self._suite_index(scenario_id.suite)
        if suite_index is None:
            return None

        for scenario_index, scenario in enumerate(self._suites[suite_index].scenarios):
            if scenario.id == scenario_id:
                return suite_index, scenario_index

        return None

    def _require_scenario_index(self, scenario_id: ScenarioId) -> tuple[int, int]:
        index = self._scenario_index(scenario_id)
        if index is None:
            logger.info('Scenario %s not found in suite %s', scenario_id.value, scenario_id.suite_id)
            raise ScenarioNotFound(scenario_id)
        return index

    def _replace_scenario(self, scenario_id: ScenarioId, update: Callable[[Scenario], Scenario]) -> None:
        suite_index, scenario_index = self._require_scenario_index(scenario_id)
        suite = self._suites[suite_index]

        scenarios = list(suite.scenarios)
        scenarios[scenario_index] = update(scenarios[scenario_index])
        self._suites[suite_index] = suite.model_copy(update={'scenarios': tuple(scenarios)})

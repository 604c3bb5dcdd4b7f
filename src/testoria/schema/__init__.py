"""Immutable entity models of the authoring hierarchy.

Defines frozen Pydantic models for elements, actions, steps, scenarios,
suites and their identities. Collections are tuples so that any value
handed to a caller is deeply immutable.
"""

from .elements import Action, Element, ElementType
from .suites import Scenario, ScenarioId, Step, Suite, SuiteId

__all__ = (
    'Action',
    'Element',
    'ElementType',
    'Scenario',
    'ScenarioId',
    'Step',
    'Suite',
    'SuiteId',
)

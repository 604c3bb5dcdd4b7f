"""Models for suites, scenarios, steps and their identities.

A suite groups scenarios (for example, one screen under test), a scenario
is one test case holding an ordered list of steps, and a step applies an
action to an element. Scenario identity is compound: it always carries
the identifier of the owning suite.
"""

from pydantic import Field

from testoria.models import SchemaModel

from .elements import Action, Element  # noqa: TC001


class SuiteId(SchemaModel):
    """Opaque identity of a suite, unique across all suites."""

    value: str = Field(
        title='Suite identifier',
        description='Identifier produced by the identifier supplier.',
    )


class ScenarioId(SchemaModel):
    """Compound identity of a scenario.

    A scenario identifier is only meaningful relative to its owning
    suite. Equality and hashing are defined over both fields.
    """

    suite_id: str = Field(
        title='Owning suite identifier',
        description='Value of the identifier of the suite owning the scenario.',
    )

    value: str = Field(
        title='Scenario identifier',
        description='Identifier produced by the identifier supplier.',
    )

    @property
    def suite(self) -> SuiteId:
        """Identity of the owning suite."""
        return SuiteId(value=self.suite_id)


class Step(SchemaModel):
    """One instruction of a scenario: an action applied to an element.

    Steps have no identity of their own and are identified only by
    position within the owning scenario.
    """

    action: Action = Field(
        title='Step action',
        description='Gesture performed on the element.',
    )

    element: Element = Field(
        title='Step element',
        description='UI control the action is applied to.',
    )


class Scenario(SchemaModel):
    """A named test case within a suite."""

    id: ScenarioId = Field(
        title='Scenario identity',
    )

    name: str = Field(
        title='Scenario name',
        description=(
            'Human-readable name, unique among sibling scenarios '
            'at creation time.'
        ),
    )

    steps: tuple[Step, ...] = Field(
        default=(),
        title='Scenario steps',
        description='Ordered steps in append order.',
    )


class Suite(SchemaModel):
    """A named top-level group of scenarios."""

    id: SuiteId = Field(
        title='Suite identity',
    )

    name: str = Field(
        title='Suite name',
        description='Human-readable name, unique among suites at creation time.',
    )

    scenarios: tuple[Scenario, ...] = Field(
        default=(),
        title='Suite scenarios',
        description='Scenarios in creation order.',
    )

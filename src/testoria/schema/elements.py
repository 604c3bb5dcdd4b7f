"""Reference data describing addressable UI controls and gestures.

Elements are supplied wholesale by an external catalog and are never
created, renamed or deleted by the authoring model. Actions form a
closed set of gestures that a step may apply to an element.
"""

from enum import StrEnum

from pydantic import Field

from testoria.models import SchemaModel


class ElementType(StrEnum):
    """Kind of an addressable UI control."""

    VIEW = 'view'
    BUTTON = 'button'


class Action(StrEnum):
    """Gesture or operation performed on an element.

    Declaration order is the documented order returned to callers.
    """

    TAP = 'tap'
    SWIPE_LEFT = 'swipeLeft'
    SWIPE_RIGHT = 'swipeRight'
    SWIPE_UP = 'swipeUp'
    SWIPE_DOWN = 'swipeDown'
    TYPE_TEXT = 'typeText'


class Element(SchemaModel):
    """Immutable reference datum describing an addressable UI control."""

    name: str = Field(
        title='Element name',
        description='Display label of the element.',
    )

    id: str = Field(
        title='Element identifier',
        description=(
            'Stable UI identifier of the element.\n'
            'The identifier is used by test runners to locate '
            'the control in the UI tree.'
        ),
        examples=[
            'login_button',
            'welcome_view',
        ],
    )

    type: ElementType = Field(
        title='Element type',
        description='Kind of the UI control.',
    )

"""JSON Schema of hierarchy snapshots.

Exporters consume the list of suites returned by
`TestModelManager.build_suites`. The schema describes that list.
"""

from functools import cache
from json import dumps

from pydantic import TypeAdapter
from pydantic.json_schema import GenerateJsonSchema

from testoria.schema import Suite


class SchemaGenerator(GenerateJsonSchema):
    """JSON Schema generator for suite snapshots."""

    @classmethod
    @cache
    def get_adapter(cls) -> TypeAdapter[list[Suite]]:
        """Return a cached adapter for the snapshot type."""
        return TypeAdapter(list[Suite])

    @classmethod
    @cache
    def make_schema(cls, indent: int | str | None = 4) -> str:
        """Generate the JSON Schema of a suite snapshot.

        Args:
            indent: Indentation level used for JSON formatting.

        Returns:
            Serialized JSON Schema string.
        """
        schema = {
            **cls.get_adapter().json_schema(
                schema_generator=cls,
                mode='serialization',
            ),
            'title': 'testoria',
            'description': 'JSON Schema for testoria suite snapshots',
            '$schema': cls.schema_dialect,
        }

        return dumps(
            schema,
            ensure_ascii=False,
            sort_keys=True,
            indent=indent,
        )

"""Element catalog loading.

An element catalog is a YAML sequence of addressable UI controls:

```yaml
- name: Log in
  id: login_button
  type: button
```

The loaded catalog is handed to the test model manager as read-only
reference data.
"""

from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError
from yaml import YAMLError, safe_load

from testoria.errors import CatalogError, ErrorContext
from testoria.schema import Element

if TYPE_CHECKING:
    from pathlib import Path

CatalogAdapter = TypeAdapter(tuple[Element, ...])


def parse_catalog(content: str, path: 'Path | None' = None) -> tuple[Element, ...]:
    """Parse and validate an element catalog document.

    Args:
        content: YAML document text.
        path: Optional source path used in error messages.

    Returns:
        Elements in document order. An empty document yields no elements.

    Raises:
        CatalogError: If the document is not valid YAML, an entry
            violates the element schema, or an identifier is repeated.
    """
    try:
        data = safe_load(content)
    except YAMLError as error:
        raise CatalogError.from_yaml_error(error, path=path) from error

    if data is None:
        return ()

    try:
        elements = CatalogAdapter.validate_python(data)
    except ValidationError as error:
        raise CatalogError.from_pydantic_error(error, data=data, path=path) from error

    seen: set[str] = set()
    for element in elements:
        if element.id in seen:
            raise CatalogError(
                f'Duplicate element identifier "{element.id}"',
                context=ErrorContext(
                    filename=str(path) if path else None,
                    element=[element.model_dump(mode='json')],
                ),
            )
        seen.add(element.id)

    return elements


def load_catalog(path: 'Path') -> tuple[Element, ...]:
    """Load an element catalog from a YAML file.

    Args:
        path: Catalog file path.

    Returns:
        Elements in file order.

    Raises:
        CatalogError: If the file can not be read as UTF-8 text or its
            content is not a valid catalog.
    """
    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as error:
        raise CatalogError.from_read_error(error, path) from error

    return parse_catalog(content, path)

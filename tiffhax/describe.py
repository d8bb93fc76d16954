"""Human-readable descriptions of decoded fields.

Presentation only: the decoding modules never import this one.
"""

import html

from tiffhax.constants import DATA_TYPE_NAMES, FIELD_NAMES, FIELD_VALUE_LOOKUP
from tiffhax.field import Field
from tiffhax.models import Data, Offset

ASCII_TYPE = 2


def field_name(tag_id: int) -> str:
    return FIELD_NAMES.get(tag_id, f'Tag_{tag_id}')


def type_name(dtype: int) -> str:
    return DATA_TYPE_NAMES.get(dtype, f'Type_{dtype}')


def value_meaning(field: Field) -> str:
    """Explain what the value field holds, or '' when it is just a number."""
    if field.is_offset:
        return ' which is an offset'

    meaning = FIELD_VALUE_LOOKUP.get(field.tag_id, {}).get(field.value)
    if meaning is not None:
        return ' which means ' + meaning

    if field.dtype == ASCII_TYPE:
        text = field.value_bytes[:field.count].rstrip(b'\x00')
        return ' which decodes to ' + text.decode('ascii', errors='replace')
    return ''


def describe_field(field: Field) -> str:
    """One-line plain text description of a field."""
    return (f'A field called {field_name(field.tag_id)} is {field.count} '
            f'{type_name(field.dtype)} values. The value shows {field.value}'
            f'{value_meaning(field)}')


def describe_offset(offset: Offset) -> str:
    kind = 'pixel data' if offset.is_data else 'values'
    return (f'{field_name(offset.field_id)} at {offset.from_} points to '
            f'{offset.count} {type_name(offset.dtype)} {kind} at {offset.to}')


def describe_data(data: Data) -> str:
    return f'pixel data starts at {data.start}'


def _byte_span(raw: bytes, css_class: str) -> str:
    return f'<span class="{css_class}">{raw.hex(" ")}</span>'


def field_html(field: Field) -> str:
    """HTML fragment showing the entry's bytes next to its description."""
    raw = field.raw
    data = ' '.join([
        _byte_span(raw[0:2], 'field_id'),
        _byte_span(raw[2:4], 'field_type'),
        _byte_span(raw[4:8], 'field_count'),
        _byte_span(raw[8:12], 'field_value'),
    ])

    value = f'<span class="field_value">{field.value}</span>'
    if field.is_offset:
        value = f'<a href="#{field.value}">{value}</a>'

    text = (f'A field called <span class="field_id">'
            f'{html.escape(field_name(field.tag_id))}</span> '
            f'is <span class="field_count">{field.count}</span> '
            f'<span class="field_type">{html.escape(type_name(field.dtype))}</span> '
            f'values. The value shows {value}{html.escape(value_meaning(field))}')

    return (f'<div class="ifd_field" id="{field.start}" '
            f'data-end="{field.end - 1}">'
            f'<div class="data">{data}</div>'
            f'<div class="text">{text}</div></div>')

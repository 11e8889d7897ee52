"""
Line Status Service.

Pure functions shared by the CLI and both renderers: service validation,
filtering of the API batches, and the two display transforms.
"""

from collections.abc import Iterable

from tpsp.core.exceptions import InvalidServiceError
from tpsp.schemas.line_status import LineItem, OutputLine, ServiceData

VALID_SERVICES: tuple[str, ...] = ("metro", "cptm", "viamobilidade", "viaquatro")

# Keys are lower-case; matching is case-insensitive.
_STATUS_ALIASES = {
    "operações encerradas": "Operação Encerrada",
    "operações normais": "Operação Normal",
}


def is_valid_service(service: str) -> bool:
    """Check a service name against VALID_SERVICES, ignoring case."""
    return service.lower() in VALID_SERVICES


def validate_service(service: str | None) -> str:
    """
    Validate the requested service filter.

    None means "all services" and yields the empty filter. Any given
    name, the empty string included, must be a known operator.

    Raises:
        InvalidServiceError: If the name is not a known operator.
    """
    if service is None:
        return ""
    if not is_valid_service(service):
        raise InvalidServiceError(service, VALID_SERVICES)
    return service


def filter_by_service(batches: Iterable[ServiceData], service: str = "") -> list[LineItem]:
    """
    Concatenate the line items of the batches matching ``service``.

    Matching is case-insensitive against the batch type. An empty service
    keeps every batch. Source order is preserved.
    """
    wanted = service.casefold()
    result: list[LineItem] = []
    for batch in batches:
        if not wanted or batch.type.casefold() == wanted:
            result.extend(batch.list_item)
    return result


def format_line_name(line: str) -> str:
    """
    Extract the color name from a line label.

    "Linha 1-Azul" -> "Azul", "LINHA 15 - PRATA" -> "Prata".
    """
    name = line.rsplit("-", 1)[-1].strip()
    if not name:
        return name
    return name[0].upper() + name[1:].lower()


def normalize_status(status: str) -> str:
    """Trim a status text and fold known plural phrases to singular."""
    status = status.strip()
    return _STATUS_ALIASES.get(status.lower(), status)


def to_output_lines(items: Iterable[LineItem]) -> list[OutputLine]:
    """Project line items to their display form."""
    return [
        OutputLine(line=format_line_name(item.line), status=normalize_status(item.status))
        for item in items
    ]

"""Request parsing helpers shared by the route modules."""

from enum import Enum

from fastapi import HTTPException

from fincalc.api.schemas import InsightResponse, ValidationErrorResponse

# pydantic error types that mean "this is not a number"
_NUMBER_ERRORS = {
    "decimal_parsing",
    "decimal_type",
    "finite_number",
    "float_parsing",
    "float_type",
    "int_parsing",
    "int_type",
}


def parse_enum(enum_cls: type[Enum], raw: str):
    """Enum member for raw, or raw itself so the validator reports it."""
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        return raw


def error_detail(errors) -> list[dict]:
    return [ValidationErrorResponse(field=e.field, message=e.message).model_dump() for e in errors]


def unprocessable(errors) -> HTTPException:
    """422 carrying every field-level error, in order."""
    return HTTPException(status_code=422, detail=error_detail(errors))


def request_errors(errors) -> list[dict]:
    """Reshape pydantic request errors into the {field, message} detail list.

    A union-typed field reports once per member; only the first is kept.
    """
    detail: list[dict] = []
    seen: set[str] = set()
    for err in errors:
        names = [part for part in err.get("loc", ()) if isinstance(part, str) and part != "body"]
        # Union members append their type name to loc; the field is the first name
        field = names[0] if names else "body"
        if field in seen:
            continue
        seen.add(field)

        kind = err.get("type", "")
        if kind == "missing":
            message = f"{field} is required"
        elif kind == "int_from_float":
            message = f"{field} must be a whole number"
        elif kind in _NUMBER_ERRORS:
            message = f"{field} must be a valid number"
        else:
            message = f"{field}: {err.get('msg', 'invalid value')}"
        detail.append(ValidationErrorResponse(field=field, message=message).model_dump())
    return detail


def insight_responses(insights) -> list[InsightResponse]:
    return [InsightResponse(kind=i.kind.value, title=i.title, message=i.message) for i in insights]

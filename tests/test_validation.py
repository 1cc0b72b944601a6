import pytest
from pydantic import Field

from mediatorx.primitives.cancellation import CancellationToken
from mediatorx.cqrs.request import Request
from mediatorx.validation.pydantic import PydanticValidator

# --- Test Models ---


class ValidatableCommand(Request):
    name: str = Field(..., min_length=3)
    age: int = Field(..., gt=0)


class AliasedCommand(Request):
    user_name: str = Field(alias="userName", min_length=3)


class PlainRequest:
    name = "test"


# --- Tests ---


@pytest.mark.asyncio
async def test_validation_success() -> None:
    validator = PydanticValidator()
    cmd = ValidatableCommand(name="Alice", age=30)

    result = await validator.validate(cmd, CancellationToken.none())

    assert result.is_valid
    assert result.errors == ()


@pytest.mark.asyncio
async def test_validation_failure() -> None:
    validator = PydanticValidator()

    # model_construct() bypasses validation.
    cmd = ValidatableCommand.model_construct(name="Al", age=-5)

    result = await validator.validate(cmd, CancellationToken.none())

    assert not result.is_valid
    assert [e.property_name for e in result.errors] == ["name", "age"]
    assert all(e.error_message for e in result.errors)


@pytest.mark.asyncio
async def test_validation_skips_non_pydantic() -> None:
    validator = PydanticValidator()

    result = await validator.validate(PlainRequest(), CancellationToken.none())

    assert result.is_valid


@pytest.mark.asyncio
async def test_validation_accepts_aliased_fields() -> None:
    validator = PydanticValidator()
    cmd = AliasedCommand(userName="alice")

    result = await validator.validate(cmd, CancellationToken.none())

    assert result.is_valid


@pytest.mark.asyncio
async def test_validation_reports_aliased_field_failures() -> None:
    validator = PydanticValidator()
    cmd = AliasedCommand.model_construct(userName="al")

    result = await validator.validate(cmd, CancellationToken.none())

    assert [e.property_name for e in result.errors] == ["userName"]

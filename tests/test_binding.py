"""Parameter binding and row mapping."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

import pytest
from sqlmodel import SQLModel

from dataaccess.database.binding import bind_parameters, map_row, parameter_names


class Order(SQLModel):
    id: int
    total: Decimal


class OrderStatus(str, Enum):
    OPEN = "open"
    SHIPPED = "shipped"


@dataclass
class OrderRecord:
    id: int
    total: Decimal


class OrderParams:
    def __init__(self):
        self.id = 1
        self.total = Decimal("9.50")
        self._cache = {}


class TestBindParameters:
    """Payload shapes."""

    def test_none(self):
        assert bind_parameters(None) == {}

    def test_mapping_is_copied(self):
        payload = {"id": 1}
        bound = bind_parameters(payload)
        assert bound == payload
        assert bound is not payload

    def test_pydantic_model(self):
        assert bind_parameters(Order(id=1, total=Decimal("9.50"))) == {"id": 1, "total": Decimal("9.50")}

    def test_dataclass(self):
        assert bind_parameters(OrderRecord(1, Decimal("9.50"))) == {"id": 1, "total": Decimal("9.50")}

    def test_plain_object_skips_private(self):
        assert bind_parameters(OrderParams()) == {"id": 1, "total": Decimal("9.50")}

    def test_list_only_when_many_allowed(self):
        payload = [{"id": 1}, OrderRecord(2, Decimal("1"))]
        assert bind_parameters(payload, allow_many=True) == [{"id": 1}, {"id": 2, "total": Decimal("1")}]
        with pytest.raises(TypeError):
            bind_parameters(payload)

    def test_unsupported(self):
        with pytest.raises(TypeError):
            bind_parameters(42)


def test_parameter_names_keep_order():
    assert parameter_names({"b": 1, "a": 2}) == ["b", "a"]
    assert parameter_names([{"x": 1, "y": 2}, {"x": 3, "y": 4}]) == ["x", "y"]
    assert parameter_names([]) == []


class TestMapRow:
    """Row shapes."""

    row = {"id": 1, "total": Decimal("9.50")}

    def test_dict(self):
        assert map_row(dict, self.row) == {"id": 1, "total": Decimal("9.50")}

    def test_pydantic(self):
        assert map_row(Order, self.row) == Order(id=1, total=Decimal("9.50"))

    def test_dataclass(self):
        assert map_row(OrderRecord, self.row) == OrderRecord(1, Decimal("9.50"))

    @pytest.mark.parametrize("scalar", [int, Decimal, date, str])
    def test_scalar_returns_first_column(self, scalar):
        assert map_row(scalar, self.row) == 1

    def test_unknown_column_fails(self):
        with pytest.raises(TypeError):
            map_row(OrderRecord, {"id": 1, "total": 0, "extra": True})

    def test_scalar_subclass_wraps_first_column(self):
        status = map_row(OrderStatus, {"status": "shipped", "id": 1})
        assert status is OrderStatus.SHIPPED
        assert map_row(OrderStatus, {"status": None}) is None

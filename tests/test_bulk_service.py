import pytest
from pydantic import BaseModel

from app.services.bulk_service import BulkService
from atams.exceptions import ConflictException


class Item(BaseModel):
    name: str
    size: int


@pytest.fixture
def service():
    return BulkService()


def run(service, db, items, operation):
    return service.run(db, items, operation, key_name="name", key_of=lambda i: i.get("name"), label="test")


def test_failures_do_not_stop_later_items(db, service):
    def operation(item):
        if item["name"].startswith("dup"):
            raise ConflictException(f"{item['name']} exists")
        return item["name"].upper()

    items = [{"name": "a"}, {"name": "dup1"}, {"name": "b"}, {"name": "dup2"}, {"name": "c"}]
    summary = run(service, db, items, operation)

    assert summary["processed"] == 5
    assert summary["successful"] == 3
    assert summary["failed"] == 2
    assert summary["results"] == ["A", "B", "C"]
    assert summary["errors"] == [
        {"name": "dup1", "error": "dup1 exists"},
        {"name": "dup2", "error": "dup2 exists"},
    ]


def test_validation_errors_name_the_field(db, service):
    summary = run(service, db, [{"name": "x", "size": "big"}], lambda item: Item.model_validate(item))

    assert summary["failed"] == 1
    assert summary["errors"][0]["error"].startswith("size:")


def test_unexpected_errors_propagate(db, service):
    def operation(item):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        run(service, db, [{"name": "a"}], operation)


def test_all_failures(db, service):
    def operation(item):
        raise ConflictException("nope")

    summary = run(service, db, [{"name": "a"}, {"name": "b"}], operation)

    assert summary["successful"] == 0
    assert summary["failed"] == 2
    assert summary["results"] == []

"""Reference worklist tests."""

from __future__ import annotations

from pathlib import Path

from json2rst.conversion_run.reference_worklist import ReferenceWorklist


def _drain(worklist: ReferenceWorklist) -> list[Path]:
    drained = []
    while worklist:
        drained.append(worklist.pop())
    return drained


def test_starts_with_root_schema() -> None:
    worklist = ReferenceWorklist(Path("/schemas/device.schema.json"))

    assert worklist.pop() == Path("/schemas/device.schema.json")
    assert not worklist


def test_new_references_are_queued_fifo_relative_to_root_dir() -> None:
    worklist = ReferenceWorklist(Path("/schemas/device.schema.json"))
    worklist.pop()

    assert worklist.register("networkAE.schema.json") is True
    assert worklist.register("networkConnection.schema.json") is True

    assert _drain(worklist) == [
        Path("/schemas/networkAE.schema.json"),
        Path("/schemas/networkConnection.schema.json"),
    ]


def test_repeated_reference_is_queued_once() -> None:
    worklist = ReferenceWorklist(Path("/schemas/device.schema.json"))

    assert worklist.register("networkAE.schema.json") is True
    assert worklist.register("networkAE.schema.json") is False

    assert _drain(worklist) == [
        Path("/schemas/device.schema.json"),
        Path("/schemas/networkAE.schema.json"),
    ]


def test_reference_already_popped_is_not_requeued() -> None:
    worklist = ReferenceWorklist(Path("/schemas/device.schema.json"))
    worklist.register("networkAE.schema.json")
    _drain(worklist)

    assert worklist.register("networkAE.schema.json") is False
    assert not worklist


def test_reference_back_to_root_is_not_queued() -> None:
    worklist = ReferenceWorklist(Path("/schemas/device.schema.json"))

    assert worklist.register("device.schema.json") is False
    assert _drain(worklist) == [Path("/schemas/device.schema.json")]

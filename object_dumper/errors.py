"""Exceptions raised by object_dumper."""
from __future__ import annotations


class DumperError(Exception):
    pass


class MemberAccessError(DumperError):
    """A public member of a composite value could not be read."""

    def __init__(self, type_name: str, member: str):
        super().__init__(f"Cannot read member '{member}' of {type_name}")
        self.type_name = type_name
        self.member = member


class SampleError(DumperError):
    pass


class SampleNotFoundError(SampleError, KeyError):
    def __init__(self, number: int):
        super().__init__(f"No sample numbered {number}")
        self.number = number

    def __str__(self) -> str:
        return f"No sample numbered {self.number}"

"""
Base classes and interfaces for letter_freq count summaries.

This module defines the abstract base class shared by the count containers
of the library. It provides the serialization round-trip (dictionary, JSON
and binary), type checks used when merging, and the memory and statistics
hooks used for inspecting a summary.
"""

import abc
import json
import sys
from typing import Any, Dict, TypeVar, Union

S = TypeVar("S", bound="CountSummary")


class CountSummary(abc.ABC):
    """
    Abstract base class for count summaries.

    A count summary holds a fixed set of counters filled by a counting pass.
    Subclasses implement the dictionary conversion, totals and merging; this
    class derives the serialization formats and statistics from them.
    """

    @abc.abstractmethod
    def total(self) -> int:
        """
        Get the sum of all counters.

        Returns:
            The total number of counted items.
        """
        pass

    @abc.abstractmethod
    def merge(self: S, other: S) -> S:
        """
        Merge this summary with another of the same type.

        Args:
            other: Another summary of the same type.

        Returns:
            A new merged summary.

        Raises:
            TypeError: If other is not of the same type.
        """
        pass

    @abc.abstractmethod
    def reset(self) -> None:
        """Zero every counter in place."""
        pass

    def clear(self) -> None:
        """Reset the summary to its initial empty state."""
        self.reset()

    def _check_same_type(self, other: Any) -> None:
        """
        Helper method to check if another summary is of the same type.

        Args:
            other: Another summary to check.

        Raises:
            TypeError: If other is not of the same type.
        """
        if not isinstance(other, self.__class__):
            raise TypeError(f"Cannot merge with {other.__class__.__name__}")

    @abc.abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the summary to a dictionary for serialization.

        Returns:
            A dictionary representation of the summary.
        """
        pass

    def _base_dict(self) -> Dict[str, Any]:
        """
        Create a dictionary with base attributes common to all summaries.

        Returns:
            A dictionary with base attributes.
        """
        return {"type": self.__class__.__name__, "total": self.total()}

    @classmethod
    @abc.abstractmethod
    def from_dict(cls: "type[S]", data: Dict[str, Any]) -> S:
        """
        Create a summary from a dictionary representation.

        Args:
            data: The dictionary containing the summary state.

        Returns:
            A new summary initialized with the given state.
        """
        pass

    def serialize(self, format: str = "json") -> Union[str, bytes]:
        """
        Serialize the summary to a string or bytes.

        Args:
            format: The serialization format ('json' or 'binary').

        Returns:
            The serialized representation of the summary.

        Raises:
            ValueError: If the format is not supported.
        """
        if format == "json":
            return json.dumps(self.to_dict())
        elif format == "binary":
            return json.dumps(self.to_dict()).encode("utf-8")
        else:
            raise ValueError(f"Unsupported serialization format: {format}")

    @classmethod
    def deserialize(cls: "type[S]", data: Union[str, bytes], format: str = "json") -> S:
        """
        Deserialize a summary from a string or bytes.

        Args:
            data: The serialized summary.
            format: The serialization format ('json' or 'binary').

        Returns:
            A new summary.

        Raises:
            ValueError: If the format is not supported.
        """
        if format == "json":
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return cls.from_dict(json.loads(data))
        elif format == "binary":
            if isinstance(data, str):
                data = data.encode("utf-8")
            return cls.from_dict(json.loads(data.decode("utf-8")))
        else:
            raise ValueError(f"Unsupported serialization format: {format}")

    def estimate_size(self) -> int:
        """
        Estimate the current memory usage of this summary in bytes.

        Subclasses should add the size of their counter storage.

        Returns:
            Estimated memory usage in bytes.
        """
        size = sys.getsizeof(self)
        if hasattr(self, "__dict__"):
            size += sys.getsizeof(self.__dict__)
        return size

    def get_stats(self) -> Dict[str, Any]:
        """
        Get detailed statistics about the current state of the summary.

        Derived classes should override this method to include their specific
        statistics while calling super().get_stats() to include base metrics.

        Returns:
            A dictionary containing various statistics about the summary state.
        """
        return {
            "type": self.__class__.__name__,
            "total": self.total(),
            "memory_bytes": self.estimate_size(),
        }

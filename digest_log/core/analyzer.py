from abc import ABC, abstractmethod
from typing import Generic, TypeVar

StatsT = TypeVar("StatsT")
ResultT = TypeVar("ResultT")


class Analyzer(ABC, Generic[StatsT, ResultT]):
    """Base class for turning collected statistics into a final result"""
    @abstractmethod
    def analyze(self, stats: StatsT) -> ResultT:
        """Order and finalise collected statistics"""
        pass

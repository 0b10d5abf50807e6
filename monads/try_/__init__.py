from . import lift
from .lift import call, lifted, lifted_void
from .monad import Failure, Success, Try

# Fixed-depth flattening, usable without the class prefix
flatten = Try.flatten
flatten2 = Try.flatten2
flatten3 = Try.flatten3
flatten4 = Try.flatten4
flatten5 = Try.flatten5
flatten6 = Try.flatten6
flatten7 = Try.flatten7
flatten8 = Try.flatten8

__all__ = (
    "lift",
    "Failure",
    "Success",
    "Try",
    "call",
    "lifted",
    "lifted_void",
    "flatten",
    "flatten2",
    "flatten3",
    "flatten4",
    "flatten5",
    "flatten6",
    "flatten7",
    "flatten8",
)

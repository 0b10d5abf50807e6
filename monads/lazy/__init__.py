from .monad import Lazy

flatten = Lazy.flatten
flatten2 = Lazy.flatten2
flatten3 = Lazy.flatten3
flatten4 = Lazy.flatten4
flatten5 = Lazy.flatten5
flatten6 = Lazy.flatten6
flatten7 = Lazy.flatten7
flatten8 = Lazy.flatten8

__all__ = (
    "Lazy",
    "flatten",
    "flatten2",
    "flatten3",
    "flatten4",
    "flatten5",
    "flatten6",
    "flatten7",
    "flatten8",
)

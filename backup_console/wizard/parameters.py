"""
Declarations of the parameters a command needs before it can run
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

# Parameter name -> answer; None while unanswered
ParameterSet = Dict[str, Optional[str]]


@dataclass(frozen=True)
class ParameterSpec:
    """
    How to ask for one command parameter.

    Attributes:
        name: Option name, e.g. 'destinationPath'
        question: Prompt text
        choices: Returns the answers to offer for completion
        choices_label: Heading printed in front of the offered answers
        root: Given the answers so far, returns a path prefix shown after
              the question
        ask: Replaces the default prompt with a custom sub-flow; receives
             this spec and the answers so far and returns the answer
    """

    name: str
    question: str
    choices: Optional[Callable[[], Sequence[str]]] = None
    choices_label: str = 'Available choices'
    root: Optional[Callable[[ParameterSet], Optional[str]]] = None
    ask: Optional[Callable[['ParameterSpec', ParameterSet], str]] = None


def parameter_set(names: Iterable[str], values: Mapping[str, Optional[str]]) -> ParameterSet:
    """Track only the given names, taking their current values."""
    return {name: values.get(name) or None for name in names}


def missing_names(specs: Sequence[ParameterSpec], values: Mapping[str, Optional[str]]) -> List[str]:
    """Names without a value, in declared order."""
    return [spec.name for spec in specs if not values.get(spec.name)]

"""
Argument Resolution Wizard

Fills in the command parameters the user did not pass on the command
line: lists what is missing, asks for each value in declared order, shows
a summary and asks for confirmation. Declining asks every missing
question again.
"""

from typing import Callable, List, Optional, Sequence

from backup_console.cli.console import Console
from backup_console.exceptions import ConfigError, UserAborted
from backup_console.logger import get_logger
from backup_console.wizard.parameters import ParameterSet, ParameterSpec, missing_names

logger = get_logger(__name__)


class ArgumentWizard:
    """Interactive prompting for missing command parameters"""

    def __init__(
        self,
        console: Console,
        specs: Sequence[ParameterSpec],
        summary: Callable[[ParameterSet], str],
        max_retries: Optional[int] = None,
        strict_choices: bool = False
    ):
        """
        Args:
            console: Terminal to prompt on
            specs: Required parameters, in the order they are asked
            summary: Builds the confirmation sentence from the answers
            max_retries: How often confirmation may be declined before
                         giving up (None asks forever)
            strict_choices: Reject answers outside the offered choices
        """
        self.console = console
        self.specs = list(specs)
        self.summary = summary
        self.max_retries = max_retries
        self.strict_choices = strict_choices

    def resolve(self, initial: ParameterSet) -> ParameterSet:
        """
        Ask for every required parameter missing from `initial`.

        Returns:
            A new ParameterSet in which every required name has a value

        Raises:
            UserAborted: If confirmation was declined more than max_retries times
            ConfigError: If strict choices are on and a choice set is empty
        """
        values = dict(initial)
        missing = missing_names(self.specs, values)
        if not missing:
            return values

        logger.debug(f"Missing arguments: {missing}")
        self._display_missing(missing)

        declined = 0
        while True:
            self._prompt(missing, values)
            if self._confirm(values):
                return values

            declined += 1
            if self.max_retries is not None and declined > self.max_retries:
                raise UserAborted(declined)

            logger.debug(f"Confirmation declined ({declined}), re-asking {missing}")
            self.console.line()
            self.console.info('Answers have been reset and re-asking questions.')
            self.console.line()

    def _display_missing(self, missing: List[str]) -> None:
        formatted = ', '.join(missing)
        self.console.info(f"These arguments haven't been filled yet: {self.console.comment(formatted)}")
        self.console.info('The following questions will fill these in for you.')
        self.console.line()

    def _prompt(self, missing: List[str], values: ParameterSet) -> None:
        specs = {spec.name: spec for spec in self.specs}
        for name in missing:
            # Stored at once so later questions can use the answer
            values[name] = self._ask(specs[name], values)
            self.console.line()

    def _ask(self, spec: ParameterSpec, values: ParameterSet) -> str:
        if spec.ask is not None:
            return spec.ask(spec, values)

        choices = None
        if spec.choices is not None:
            choices = list(spec.choices())
            if self.strict_choices and not choices:
                raise ConfigError(
                    f"Cannot answer '{spec.name}': nothing is configured "
                    f"({spec.choices_label.lower()} is empty)"
                )
            formatted = ', '.join(choices)
            self.console.info(f"{spec.choices_label}: {self.console.comment(formatted)}")

        question = spec.question
        if spec.root is not None:
            root = spec.root(values) or ''
            question = f"{question} {self.console.comment(root)}"

        while True:
            if choices is not None:
                answer = self.console.ask_with_completion(question, choices)
            else:
                answer = self.console.ask(question)

            if not answer:
                continue

            if self.strict_choices and choices is not None and answer not in choices:
                self.console.error(f"'{answer}' is not one of: {', '.join(choices)}")
                continue

            return answer

    def _confirm(self, values: ParameterSet) -> bool:
        self.console.info('Just to be sure...')
        self.console.info(self.summary(values))
        self.console.line()
        return self.console.confirm('Are these correct? [Y/n]')

"""Console driver that steps through the lazy sequence demos."""

import logging
from itertools import chain
from typing import Callable, Dict, Iterable, Optional, Tuple

from .config import AppConfig
from .filters import filter_by, filter_even, filter_non_blank
from .ordering import order_alphabetically
from .predicates import contains_letter
from .protocols import LoggerProtocol
from .sources import fake_name_sequence, name_sequence, range_sequence

BLANK_ENTRIES = ("", "   ", None, "\t")


class ConsoleDriver:
    """
    Renders each demo to the console and pauses between sections.

    Single Responsibility: Drive the demos and handle user input.
    Input and output are injected so the driver can run without a terminal.
    """

    def __init__(
        self,
        config: AppConfig,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize driver.

        Args:
            config: Application configuration
            input_func: Function reading one line of user input
            output_func: Function writing one line of output
            logger: Logger instance
        """
        self.config = config
        self._input = input_func
        self._output = output_func
        self._logger = logger or logging.getLogger(__name__)

        # key -> (CLI name, menu title, handler)
        self.demos: Dict[str, Tuple[str, str, Callable[[], None]]] = {
            "1": ("names", "All names", self.show_all_names),
            "2": ("evens", "Even numbers", self.show_even_numbers),
            "3": ("letter", "Names containing a letter", self.show_names_with_letter),
            "4": ("ordered", "Names in alphabetical order", self.show_ordered_names),
            "5": ("non-blank", "Non-blank entries", self.show_non_blank_entries),
            "6": ("fake", "Generated names, ordered", self.show_fake_names),
        }

    def show_all_names(self):
        self._render("All names", name_sequence())

    def show_even_numbers(self):
        start, total = self.config.range_start, self.config.range_total
        numbers = filter_even(range_sequence(start, total))
        self._render(f"Even numbers in {start}..{start + total - 1}", numbers)

    def show_names_with_letter(self):
        letter = self.config.filter_letter
        names = filter_by(name_sequence(), contains_letter(letter))
        self._render(f"Names containing '{letter}' (any case)", names)

    def show_ordered_names(self):
        self._render("Names, ascending", order_alphabetically(name_sequence()))
        self._render(
            "Names, descending", order_alphabetically(name_sequence(), ascending=False)
        )

    def show_non_blank_entries(self):
        entries = chain(name_sequence(), BLANK_ENTRIES)
        self._render("Non-blank entries", filter_non_blank(entries))

    def show_fake_names(self):
        names = fake_name_sequence(self.config.fake_name_count, self.config.fake_name_seed)
        self._render(
            f"{self.config.fake_name_count} generated names "
            f"(seed {self.config.fake_name_seed}), ascending",
            order_alphabetically(names),
        )

    def _render(self, title: str, elements: Iterable) -> int:
        """Write a section header followed by one line per element."""
        self._output("")
        self._output(title)
        self._output("-" * len(title))
        count = 0
        for element in elements:
            self._output(str(element))
            count += 1
        self._logger.debug(f"Rendered {count} elements for '{title}'")
        return count

    def pause(self):
        """Wait for the user unless pausing is disabled."""
        if not self.config.pause_between_sections:
            return
        try:
            self._input("\nPress Enter to continue...")
        except EOFError:
            self._logger.debug("Input closed while pausing")

    def run_demo(self, name: str):
        """Run a demo by its CLI name, or every demo for ``all``."""
        if name == "all":
            self.run_all()
            return
        for cli_name, _, handler in self.demos.values():
            if cli_name == name:
                handler()
                return
        valid = ", ".join(cli_name for cli_name, _, _ in self.demos.values())
        raise ValueError(f"Unknown demo: {name}. Valid options: {valid}, all")

    def run_all(self):
        """Run every demo in menu order, pausing after each section."""
        for _, _, handler in self.demos.values():
            handler()
            self.pause()

    def show_menu(self):
        self._output("")
        self._output("Lazy sequence demos")
        self._output("=" * 19)
        for key, (_, title, _) in self.demos.items():
            self._output(f"  {key}. {title}")
        self._output("  a. Run all demos")
        self._output("  q. Quit")

    def run_menu(self):
        """Show the menu until the user quits or input ends."""
        while True:
            self.show_menu()
            try:
                choice = self._input("\nChoose an option: ").strip().lower()
            except EOFError:
                self._logger.debug("Input closed, leaving menu")
                return

            if choice == "q":
                return
            if choice == "a":
                self.run_all()
            elif choice in self.demos:
                self.demos[choice][2]()
                self.pause()
            else:
                self._output(f"Unknown option: {choice!r}")

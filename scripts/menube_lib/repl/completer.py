"""
Tab completion for the menube REPL.

Completes REPL verbs and the labels of the items in the active branch.
"""

from prompt_toolkit.completion import Completer, Completion

from menube_lib.menu import MenuNavigator, MoreMarker


# Verbs understood by handle_command()
VERBS = ["up", "down", "select", "back", "top", "show", "help", "exit"]


class MenuCompleter(Completer):
    """Completer driven by the navigator's current position."""

    def __init__(self, navigator: MenuNavigator):
        self.navigator = navigator

    def candidates(self) -> list[str]:
        """Verbs plus labels of the active branch."""
        labels = [
            item.label
            for item in self.navigator.get_active_branch()
            if item.label and not isinstance(item, MoreMarker)
        ]
        if self.navigator.depth == 1:
            verbs = [v for v in VERBS if v not in ("back", "top")]
        else:
            verbs = list(VERBS)
        return verbs + labels

    def get_completions(self, document, complete_event):
        word = document.text_before_cursor.lstrip().lower()

        seen = set()
        for candidate in self.candidates():
            if candidate in seen:
                continue
            seen.add(candidate)
            if candidate.lower().startswith(word):
                yield Completion(candidate, start_position=-len(document.text_before_cursor.lstrip()))

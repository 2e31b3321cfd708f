"""Interactive prompts for the create cluster command.

Values missing from the command line are asked for on the terminal. Each
prompt validates its input with the same validators used for flags, so an
invalid answer is reported inline and the user can correct it.
"""

from collections.abc import Callable, Sequence
from typing import Any

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from rosactl.ocm.versions import ChannelGroup, validate_version
from rosactl.utils.errors import RosaError
from rosactl.utils.validation import validate_cluster_name, validate_root_disk_size_flag


class RosaValidator(Validator):
    """prompt_toolkit validator backed by a rosactl validation function.

    The check callable receives the buffer text and raises RosaError when the
    text is not acceptable.
    """

    def __init__(self, check: Callable[[str], Any]):
        self.check = check

    def validate(self, document: Document) -> None:
        text = document.text.strip()
        try:
            self.check(text)
        except RosaError as e:
            raise ValidationError(message=str(e), cursor_position=len(document.text)) from e


def ask_cluster_name() -> str:
    """Prompt for a cluster name."""
    return prompt("Cluster name: ", validator=RosaValidator(validate_cluster_name)).strip()


def ask_version(
    available: Sequence[str],
    channel_group: ChannelGroup | str,
    hosted_cp: bool,
) -> str:
    """Prompt for an OpenShift version, completing from the available versions.

    Args:
        available: Versions available in the channel group
        channel_group: Channel group of the versions
        hosted_cp: Whether the cluster uses a hosted control plane

    Returns:
        Selected version (raw, not the version id)
    """

    def check(text: str) -> None:
        validate_version(text, available, channel_group, not hosted_cp, hosted_cp)

    return prompt(
        "OpenShift version: ",
        default=available[0] if available else "",
        completer=WordCompleter(list(available), WORD=True),
        validator=RosaValidator(check),
    ).strip()


def ask_worker_disk_size(default: str) -> str:
    """Prompt for the worker root disk size."""
    return prompt(
        "Worker disk size: ",
        default=default,
        validator=RosaValidator(validate_root_disk_size_flag),
    ).strip()

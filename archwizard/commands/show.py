"""Print a previously saved configuration."""

import sys

from ..i18n import t
from ..persistence import DEFAULT_OUTPUT, PersistenceError, load_config
from ..ui import fail, print_summary


def run_show(args):
    path = getattr(args, "file", None) or DEFAULT_OUTPUT
    try:
        cfg = load_config(path)
    except PersistenceError as e:
        fail(t("show.load_failed", error=str(e)))
        sys.exit(1)
    print_summary(cfg)
    return cfg

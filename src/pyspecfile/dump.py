# -*- encoding: utf-8 -*-
# @File   : dump.py
# @Time   : 2026/10/19 16:03:30
# @Author : Kariko Lin

"""Human readable dump of a spec store, strictly for debugging.

It is NOT a way to save config files; there's no reader for it.
"""

from typing import Any, TextIO

import yaml

from .model import ScopedKey, SpecStore
from .tokenizer import ascii_lower


def to_tree(store: SpecStore) -> dict[str, dict[str, Any]]:
    """Group specs by section; scripts become `{'script': [...]}`.

    `[Net]` and `[NET]` are one section, named as it was first spelled.
    """
    spelling: dict[str, str] = {}
    ret: dict[str, dict[str, Any]] = {}
    for k, v in store._items():
        sk = ScopedKey.parse(k)
        section = spelling.setdefault(ascii_lower(sk.section), sk.section)
        ret.setdefault(section, {})[sk.key] = (
            {'script': list(v)} if store.is_script(k) else list(v))
    return ret


def dump_specs(store: SpecStore, stream: TextIO | None = None) -> str:
    """Dump as YAML, into `stream` if given. The text is returned anyway."""
    text = yaml.safe_dump(
        to_tree(store),
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=True)
    if stream is not None:
        stream.write(text)
    return text

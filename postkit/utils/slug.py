"""Slug derivation for post file names."""

from __future__ import annotations

import re
from unicodedata import normalize

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Return a lowercase, hyphen-separated slug for ``text``.

    Rules:
    - Text is NFKD-normalized and reduced to ASCII, so ``Café`` gives ``cafe``.
    - Letters are lowercased before matching.
    - Any run of characters outside ``a-z0-9`` collapses to one ``-``.
    - Leading and trailing hyphens are trimmed.
    - Text with nothing left after ASCII folding yields ``""``.
    """

    folded = normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM_RE.sub("-", folded.lower()).strip("-")

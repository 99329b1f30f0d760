"""Semantic-version parsing and npm-style range floors.

Only the parts needed for reconciliation are implemented: parsing concrete
versions, desugaring npm range syntax into comparator sets, testing a version
against a range, and computing the minimum version that satisfies a range
(the "floor").

Supported range syntax (as used in package.json):
  - unions:            ``^1.2.0 || ^2.0.0``
  - hyphen ranges:     ``1.2 - 2.3.4``
  - caret / tilde:     ``^1.2.3``, ``~1.2``, ``~>1.2``
  - primitives:        ``>=1.2.3``, ``>1``, ``<=2``, ``<2.0.0``, ``=1.2.3``
  - x-ranges:          ``1.x``, ``1.2.*``, ``*``, ``""``
  - an optional ``v`` prefix and build metadata (ignored)
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Optional, Sequence, Tuple, Union

from layerdeps.core.exceptions import VersionRangeError

_PARTIAL_RE = re.compile(
    r"""^v?
    (?P<major>\d+|[xX*])
    (?:\.(?P<minor>\d+|[xX*])
      (?:\.(?P<patch>\d+|[xX*])
        (?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
        (?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?
      )?
    )?$""",
    re.VERBOSE,
)
_COMPARATOR_RE = re.compile(r"^(?P<op><=|>=|<|>|=|~>|~|\^)?(?P<version>.*)$")
_HYPHEN_RE = re.compile(r"^\s*(?P<low>\S+)\s+-\s+(?P<high>\S+)\s*$")
_OP_SPACE_RE = re.compile(r"(<=|>=|<|>|=|~>|~|\^)\s+")

PreRelease = Tuple[Union[int, str], ...]


def _pre_key(pre: PreRelease) -> Tuple[Tuple[int, Union[int, str]], ...]:
    # Numeric identifiers sort before alphanumeric ones.
    return tuple((0, p) if isinstance(p, int) else (1, p) for p in pre)


@total_ordering
@dataclass(frozen=True)
class Version:
    """A concrete semantic version (build metadata dropped)."""

    major: int
    minor: int
    patch: int
    prerelease: PreRelease = ()

    @property
    def core(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return base + "-" + ".".join(str(p) for p in self.prerelease)
        return base

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        if self.core != other.core:
            return self.core < other.core
        if self.prerelease == other.prerelease:
            return False
        # A release has higher precedence than any of its prereleases.
        if not self.prerelease:
            return False
        if not other.prerelease:
            return True
        return _pre_key(self.prerelease) < _pre_key(other.prerelease)


ZERO = Version(0, 0, 0)


def _parse_pre(raw: Optional[str]) -> PreRelease:
    if not raw:
        return ()
    return tuple(int(p) if p.isdigit() else p for p in raw.split("."))


def _is_x(part: Optional[str]) -> bool:
    return part is None or part in {"x", "X", "*"}


@dataclass(frozen=True)
class _Partial:
    major: Optional[int]
    minor: Optional[int]
    patch: Optional[int]
    prerelease: PreRelease

    @property
    def x_major(self) -> bool:
        return self.major is None

    @property
    def x_minor(self) -> bool:
        return self.minor is None

    @property
    def x_patch(self) -> bool:
        return self.patch is None

    def filled(self) -> Version:
        return Version(self.major or 0, self.minor or 0, self.patch or 0, self.prerelease)


def _parse_partial(text: str) -> _Partial:
    m = _PARTIAL_RE.match(text.strip())
    if not m:
        raise ValueError(f"Invalid version: {text!r}")
    major_raw, minor_raw, patch_raw = m.group("major"), m.group("minor"), m.group("patch")
    major = None if _is_x(major_raw) else int(major_raw)
    minor = None if major is None or _is_x(minor_raw) else int(minor_raw)
    patch = None if minor is None or _is_x(patch_raw) else int(patch_raw)
    pre = _parse_pre(m.group("pre")) if patch is not None else ()
    return _Partial(major, minor, patch, pre)


def parse_version(text: str) -> Version:
    """Parse a concrete version (``1.2.3``, ``v1.2.3-beta.1``).

    Raises:
        ValueError: If ``text`` is not a full semantic version.
    """
    partial = _parse_partial(text)
    if partial.x_major or partial.x_minor or partial.x_patch:
        raise ValueError(f"Not a concrete version: {text!r}")
    return partial.filled()


@dataclass(frozen=True)
class Comparator:
    """A primitive comparator: ``op`` in {"", ">=", ">", "<=", "<"}.

    ``op == ""`` with ``version is None`` matches any version.
    """

    op: str
    version: Optional[Version]

    def test(self, v: Version) -> bool:
        if self.version is None:
            return True
        if self.op in ("", "="):
            return v == self.version
        if self.op == ">=":
            return v >= self.version
        if self.op == ">":
            return v > self.version
        if self.op == "<=":
            return v <= self.version
        if self.op == "<":
            return v < self.version
        raise ValueError(f"Unknown operator: {self.op!r}")


ANY = Comparator("", None)
ComparatorSet = Tuple[Comparator, ...]


def _bound(op: str, major: int, minor: int, patch: int, pre: PreRelease = ()) -> Comparator:
    return Comparator(op, Version(major, minor, patch, pre))


def _upper(major: int, minor: int, patch: int) -> Comparator:
    # "<X.Y.Z-0" excludes prereleases of the next version.
    return _bound("<", major, minor, patch, (0,))


def _desugar_tilde(p: _Partial) -> List[Comparator]:
    if p.x_major:
        return [ANY]
    if p.x_minor:
        return [_bound(">=", p.major, 0, 0), _upper(p.major + 1, 0, 0)]
    if p.x_patch:
        return [_bound(">=", p.major, p.minor, 0), _upper(p.major, p.minor + 1, 0)]
    return [Comparator(">=", p.filled()), _upper(p.major, p.minor + 1, 0)]


def _desugar_caret(p: _Partial) -> List[Comparator]:
    if p.x_major:
        return [ANY]
    if p.x_minor:
        return [_bound(">=", p.major, 0, 0), _upper(p.major + 1, 0, 0)]
    if p.x_patch:
        if p.major == 0:
            return [_bound(">=", 0, p.minor, 0), _upper(0, p.minor + 1, 0)]
        return [_bound(">=", p.major, p.minor, 0), _upper(p.major + 1, 0, 0)]
    low = Comparator(">=", p.filled())
    if p.major == 0:
        if p.minor == 0:
            return [low, _upper(0, 0, p.patch + 1)]
        return [low, _upper(0, p.minor + 1, 0)]
    return [low, _upper(p.major + 1, 0, 0)]


def _desugar_primitive(op: str, p: _Partial) -> List[Comparator]:
    any_x = p.x_major or p.x_minor or p.x_patch
    if op == "=":
        op = ""
    if not any_x:
        return [Comparator(op, p.filled())]
    if p.x_major:
        # ">*" and "<*" can never match.
        if op in (">", "<"):
            return [_bound("<", 0, 0, 0, (0,))]
        return [ANY]
    if op == "":
        if p.x_minor:
            return [_bound(">=", p.major, 0, 0), _upper(p.major + 1, 0, 0)]
        return [_bound(">=", p.major, p.minor, 0), _upper(p.major, p.minor + 1, 0)]

    major, minor = p.major, p.minor or 0
    if op == ">":
        if p.x_minor:
            return [_bound(">=", major + 1, 0, 0)]
        return [_bound(">=", major, minor + 1, 0)]
    if op == "<=":
        if p.x_minor:
            return [_upper(major + 1, 0, 0)]
        return [_upper(major, minor + 1, 0)]
    if op == "<":
        return [_bound("<", major, minor, 0, (0,))]
    # ">="
    return [_bound(">=", major, minor, 0)]


def _desugar_hyphen(low: _Partial, high: _Partial) -> List[Comparator]:
    out: List[Comparator] = []
    if not low.x_major:
        out.append(Comparator(">=", low.filled()))
    if high.x_major:
        pass
    elif high.x_minor:
        out.append(_upper(high.major + 1, 0, 0))
    elif high.x_patch:
        out.append(_upper(high.major, high.minor + 1, 0))
    else:
        out.append(Comparator("<=", high.filled()))
    return out or [ANY]


def _parse_comparator(token: str) -> List[Comparator]:
    m = _COMPARATOR_RE.match(token)
    op = m.group("op") or "" if m else ""
    version_text = m.group("version") if m else token
    partial = _parse_partial(version_text)
    if op in ("~", "~>"):
        return _desugar_tilde(partial)
    if op == "^":
        return _desugar_caret(partial)
    return _desugar_primitive(op, partial)


def parse_range(text: str) -> Tuple[ComparatorSet, ...]:
    """Desugar an npm range into a union of comparator sets.

    Raises:
        ValueError: If any part of the range is not valid range syntax.
    """
    sets: List[ComparatorSet] = []
    for raw_set in str(text).split("||"):
        raw_set = raw_set.strip()
        hyphen = _HYPHEN_RE.match(raw_set)
        if hyphen:
            comparators = _desugar_hyphen(
                _parse_partial(hyphen.group("low")), _parse_partial(hyphen.group("high"))
            )
        else:
            normalized = _OP_SPACE_RE.sub(r"\1", raw_set)
            tokens = normalized.split()
            comparators = [c for tok in tokens for c in _parse_comparator(tok)] or [ANY]
        sets.append(tuple(comparators))
    return tuple(sets)


def _test_set(comparators: Sequence[Comparator], v: Version) -> bool:
    if not all(c.test(v) for c in comparators):
        return False
    if not v.prerelease:
        return True
    # A prerelease only matches when some comparator opts into prereleases of
    # the same major.minor.patch tuple.
    return any(
        c.version is not None and c.version.prerelease and c.version.core == v.core
        for c in comparators
    )


def satisfies(version: Union[str, Version], range_text: str) -> bool:
    v = version if isinstance(version, Version) else parse_version(version)
    return any(_test_set(s, v) for s in parse_range(range_text))


def min_version(range_text: str) -> Version:
    """Return the lowest version that satisfies ``range_text``.

    For caret/tilde ranges this is the declared floor (``^1.4.0`` → ``1.4.0``).

    Raises:
        VersionRangeError: If the range is invalid or no version satisfies it.
    """
    try:
        sets = parse_range(range_text)
    except ValueError as exc:
        raise VersionRangeError(
            f"Invalid version range: {range_text!r}", context={"range": range_text}
        ) from exc

    def _test(v: Version) -> bool:
        return any(_test_set(s, v) for s in sets)

    for candidate in (ZERO, Version(0, 0, 0, (0,))):
        if _test(candidate):
            return candidate

    best: Optional[Version] = None
    for comparators in sets:
        set_min: Optional[Version] = None
        for comp in comparators:
            if comp.version is None or comp.op in ("<", "<="):
                continue
            candidate = comp.version
            if comp.op == ">":
                if candidate.prerelease:
                    candidate = Version(*candidate.core, candidate.prerelease + (0,))
                else:
                    candidate = Version(candidate.major, candidate.minor, candidate.patch + 1)
            if set_min is None or candidate > set_min:
                set_min = candidate
        if set_min is not None and _test_set(comparators, set_min):
            if best is None or set_min < best:
                best = set_min

    if best is None:
        raise VersionRangeError(
            f"No version satisfies range: {range_text!r}", context={"range": range_text}
        )
    return best


def compare_per_field(layer: Version, root: Version) -> bool:
    """True when any of major/minor/patch of ``layer`` exceeds the same field of ``root``.

    Fields are compared independently, so ``1.9.0`` vs ``2.0.0`` is True
    (minor 9 > 0) even though ``1.9.0`` has lower precedence.
    """
    return (
        layer.major > root.major
        or layer.minor > root.minor
        or layer.patch > root.patch
    )


def compare_precedence(layer: Version, root: Version) -> bool:
    """True when ``layer`` has strictly higher semver precedence than ``root``."""
    return layer > root


__all__ = [
    "ANY",
    "Comparator",
    "Version",
    "compare_per_field",
    "compare_precedence",
    "min_version",
    "parse_range",
    "parse_version",
    "satisfies",
]

import re

# Transposition ring: pitch classes in semitone order from C
PITCH_CLASSES = (
    "C", "C#", "D", "D#", "E", "F",
    "F#", "G", "G#", "A", "A#", "B",
)

# Flat spellings -> their sharp equivalent on the ring
FLAT_ALIASES = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

# Regex: root is a capital letter optionally followed by # or b, the rest is suffix
_ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)

# A chord-looking token: root plus quality/extension, optionally a slash and
# a bass side whose own root may carry an accidental (D/F#)
_CHORD_TOKEN_RE = re.compile(
    r"[A-G][#b]?[a-zA-Z0-9º°+\-]*(?:/(?:[A-G][#b]?)?[a-zA-Z0-9º°+\-/]*)?"
)

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")
_PADDING_RE = re.compile(r"^(\s*)(.*?)(\s*)\Z", re.DOTALL)

_OPENERS = "(["
# Stripped before classifying a token
_CLASSIFY_CLOSERS = ")],;:"
# Kept aside while transposing; anything else stays in the chord suffix
_TRANSPOSE_CLOSERS = ")],"


def normalize_note(note: str | None) -> str | None:
    """Map a note spelling onto the ring, or None when it is not a note.

    Flat aliases are matched on their canonical spelling ('Db', 'Bb').
    Any other input is uppercased and accepted only if it names a pitch class.
    """
    if not note:
        return None
    if note in FLAT_ALIASES:
        return FLAT_ALIASES[note]
    upper = note.upper()
    if upper in PITCH_CLASSES:
        return upper
    return None


def transpose_note(note: str | None, semitones: int) -> str | None:
    """Shift a single note around the ring.

    Unrecognized spellings come back unchanged in the uppercased form the
    lookup saw ('bb' -> 'BB'); empty input comes back as given.
    """
    normalized = normalize_note(note)
    if normalized is None:
        # uppercased passthrough: 'bb' comes back as 'BB'
        return note.upper() if note else note
    index = (PITCH_CLASSES.index(normalized) + semitones) % 12
    return PITCH_CLASSES[index]


def parse_key(key: str) -> int:
    """Return the ring index (0-11) for a key string like 'C', 'F#', 'Bb'.

    Raises ValueError if the key is not recognized.
    """
    normalized = normalize_note(key)
    if normalized is None:
        raise ValueError(f"Unknown key: {key!r}")
    return PITCH_CLASSES.index(normalized)


def semitone_interval(source_key: str, target_key: str) -> int:
    """Return the upward semitone interval from source to target (0-11)."""
    return (parse_key(target_key) - parse_key(source_key)) % 12


def parse_chord_root(symbol: str) -> str | None:
    """Extract the root spelling from a chord symbol like 'Dm7', 'F#7', 'Bbmaj7'.

    Returns None if no valid root is found.
    """
    m = _ROOT_RE.match(symbol)
    return m.group(1) if m else None


def current_key(original_key: str | None, semitones: int) -> str | None:
    """Key a chart is displayed in after shifting it by ``semitones``."""
    if not original_key or normalize_note(original_key) is None:
        return None
    return transpose_note(original_key, semitones)


def transpose_chord_symbol(symbol: str, semitones: int) -> str:
    """Transpose a chord symbol by a semitone interval.

    Keeps quality/extensions unchanged; only the root is transposed.
    """
    m = _ROOT_RE.match(symbol)
    if not m:
        return symbol  # can't parse root, return as-is

    root, suffix = m.groups()
    if normalize_note(root) is None:
        return symbol  # e.g. 'Cb', 'E#': not on the ring

    return transpose_note(root, semitones) + suffix


def transpose_chord(chord: str, semitones: int) -> str:
    """Transpose a chord, handling slash chords like 'D/F#'.

    Only the first '/' splits; anything after it belongs to the bass side.
    """
    if "/" in chord:
        primary, bass = chord.split("/", 1)
        return (
            transpose_chord_symbol(primary, semitones)
            + "/"
            + transpose_chord_symbol(bass, semitones)
        )
    return transpose_chord_symbol(chord, semitones)


def _strip_wrappers(token: str, closers: str) -> tuple[str, str, str]:
    opener = token[0] if token and token[0] in _OPENERS else ""
    rest = token[len(opener):]
    closer = rest[-1] if rest and rest[-1] in closers else ""
    core = rest[:len(rest) - len(closer)]
    return opener, core, closer


def looks_like_chord(token: str) -> bool:
    """Heuristic: does a whitespace-delimited token read as a chord symbol?

    One leading '(' or '[' and one trailing ')', ']', ',', ';' or ':' are
    ignored. Words such as 'Amor' or 'Be' match too.
    """
    _, core, _ = _strip_wrappers(token, _CLASSIFY_CLOSERS)
    return _CHORD_TOKEN_RE.fullmatch(core) is not None


def _transpose_segment(segment: str, semitones: int) -> str:
    token = segment.strip()
    if not token or not looks_like_chord(token):
        return segment

    prefix, token, suffix = _PADDING_RE.match(segment).groups()
    opener, core, closer = _strip_wrappers(token, _TRANSPOSE_CLOSERS)
    return prefix + opener + transpose_chord(core, semitones) + closer + suffix


def transpose_line(line: str, semitones: int) -> str:
    """Transpose every chord token in a line, keeping all other text intact."""
    segments = _WHITESPACE_SPLIT_RE.split(line)
    return "".join(_transpose_segment(s, semitones) for s in segments)


def transpose_chart(chart: str | None, semitones: int) -> str:
    """Transpose a newline-delimited chord chart line by line.

    Empty or missing charts yield an empty string.
    """
    if not chart:
        return ""
    return "\n".join(transpose_line(line, semitones) for line in chart.split("\n"))


def infer_key(chart: str | None) -> str | None:
    """Guess a chart's key from the root of its first chord-like token."""
    if not chart:
        return None
    for line in chart.split("\n"):
        for token in line.split():
            if not looks_like_chord(token):
                continue
            _, core, _ = _strip_wrappers(token, _CLASSIFY_CLOSERS)
            root = normalize_note(parse_chord_root(core))
            if root is not None:
                return root
    return None

"""String tables for symbol and bracket tokens."""

from __future__ import annotations

from asciimath_unicode.core.emoji import SkinTone, lookup_emoji
from asciimath_unicode.core.exceptions import UnknownSymbolError, UnmappedBracketError


SYMBOLS: dict[str, str] = {
    "/": "/",
    "//": "/",
    "^": "^",
    "_": "_",
    ",": ",",
    # greek
    "alpha": "α",
    "Alpha": "Α",
    "beta": "β",
    "Beta": "Β",
    "chi": "χ",
    "Chi": "Χ",
    "delta": "δ",
    "Delta": "Δ",
    "epsi": "ε",
    "epsilon": "ε",
    "Epsi": "Ε",
    "Epsilon": "Ε",
    "varepsilon": "ϵ",
    "eta": "η",
    "Eta": "Η",
    "gamma": "γ",
    "Gamma": "Γ",
    "iota": "ι",
    "Iota": "Ι",
    "kappa": "κ",
    "Kappa": "Κ",
    "varkappa": "ϰ",
    "lambda": "λ",
    "lamda": "λ",
    "Lambda": "Λ",
    "Lamda": "Λ",
    "mu": "μ",
    "Mu": "Μ",
    "nu": "ν",
    "Nu": "Ν",
    "omega": "ω",
    "Omega": "Ω",
    "phi": "φ",
    "varphi": "ϕ",
    "Phi": "Φ",
    "pi": "π",
    "Pi": "Π",
    "varpi": "ϖ",
    "psi": "ψ",
    "Psi": "Ψ",
    "rho": "ρ",
    "Rho": "Ρ",
    "varrho": "ϱ",
    "sigma": "σ",
    "Sigma": "Σ",
    "tau": "τ",
    "Tau": "Τ",
    "theta": "θ",
    "vartheta": "ϑ",
    "Theta": "Θ",
    "Vartheta": "ϴ",
    "upsilon": "υ",
    "Upsilon": "Υ",
    "xi": "ξ",
    "Xi": "Ξ",
    "zeta": "ζ",
    "Zeta": "Ζ",
    # operations
    "*": "⋅",
    "cdot": "⋅",
    "**": "∗",
    "ast": "∗",
    "***": "⋆",
    "star": "⋆",
    "\\\\": "\\",
    "backslash": "\\",
    "setminus": "\\",
    "xx": "×",
    "times": "×",
    "|><": "⋉",
    "ltimes": "⋉",
    "><|": "⋊",
    "rtimes": "⋊",
    "|><|": "⋈",
    "bowtie": "⋈",
    "-:": "÷",
    "div": "÷",
    "divide": "÷",
    "@": "∘",
    "circ": "∘",
    "o+": "⊕",
    "oplus": "⊕",
    "ox": "⊗",
    "otimes": "⊗",
    "o.": "⊙",
    "odot": "⊙",
    "sum": "∑",
    "prod": "∏",
    "^^": "∧",
    "wedge": "∧",
    "land": "∧",
    "^^^": "⋀",
    "bigwedge": "⋀",
    "vv": "∨",
    "vee": "∨",
    "lor": "∨",
    "vvv": "⋁",
    "bigvee": "⋁",
    "nn": "∩",
    "cap": "∩",
    "nnn": "⋂",
    "bigcap": "⋂",
    "uu": "∪",
    "cup": "∪",
    "uuu": "⋃",
    "bigcup": "⋃",
    # relations
    "=": "=",
    "!=": "≠",
    "ne": "≠",
    "lt": "<",
    "<": "<",
    "<=": "≤",
    "le": "≤",
    "lt=": "≤",
    "leq": "≤",
    "gt": ">",
    ">": ">",
    "mlt": "≪",
    "ll": "≪",
    ">=": "≥",
    "ge": "≥",
    "gt=": "≥",
    "geq": "≥",
    "mgt": "≫",
    "gg": "≫",
    "-<": "≺",
    "prec": "≺",
    "-lt": "≺",
    ">-": "≻",
    "succ": "≻",
    "-<=": "⪯",
    "preceq": "⪯",
    ">-=": "⪰",
    "succeq": "⪰",
    "in": "∈",
    "!in": "∉",
    "notin": "∉",
    "sub": "⊂",
    "subset": "⊂",
    "sup": "⊃",
    "supset": "⊃",
    "sube": "⊆",
    "subseteq": "⊆",
    "supe": "⊇",
    "supseteq": "⊇",
    "-=": "≡",
    "equiv": "≡",
    "~=": "≅",
    "cong": "≅",
    "~~": "≈",
    "aprox": "≈",
    "~": "~",
    "sim": "~",
    "prop": "∝",
    "propto": "∝",
    # logical
    "not": "¬",
    "neg": "¬",
    "=>": "⇒",
    "implies": "⇒",
    "rArr": "⇒",
    "Rightarrow": "⇒",
    "==>": "⇒",
    "<=>": "⇔",
    "iff": "⇔",
    "hArr": "⇔",
    "Leftrightarrow": "⇔",
    "<==>": "⇔",
    "AA": "∀",
    "forall": "∀",
    "EE": "∃",
    "exists": "∃",
    "!EE": "∄",
    "notexists": "∄",
    "_|_": "⊥",
    "bot": "⊥",
    "TT": "⊤",
    "top": "⊤",
    "|--": "⊢",
    "vdash": "⊢",
    "|==": "⊨",
    "models": "⊨",
    "and": " and ",
    "or": " or ",
    "if": " if ",
    # misc
    ":|:": "|",
    "|": "|",
    "int": "∫",
    "oint": "∮",
    "del": "∂",
    "partial": "∂",
    "grad": "∇",
    "nabla": "∇",
    "+-": "±",
    "pm": "±",
    "-+": "∓",
    "mp": "∓",
    "O/": "∅",
    "emptyset": "∅",
    "oo": "∞",
    "infty": "∞",
    "aleph": "ℵ",
    "...": "…",
    "ldots": "…",
    ":.": "∴",
    "therefore": "∴",
    ":'": "∵",
    "because": "∵",
    "/_": "∠",
    "angle": "∠",
    "/_\\": "△",
    "triangle": "△",
    "'": "'",
    "prime": "'",
    "\\ ": " ",
    "quad": " ",
    "qquad": " ",
    "frown": "⌢",
    "cdots": "⋯",
    "vdots": "⋮",
    "ddots": "⋱",
    "diamond": "⋄",
    "square": "□",
    "CC": "ℂ",
    "NN": "ℕ",
    "QQ": "ℚ",
    "RR": "ℝ",
    "ZZ": "ℤ",
    "ell": "ℓ",
    # arrows
    "uarr": "↑",
    "uparrow": "↑",
    "darr": "↓",
    "downarrow": "↓",
    "rarr": "→",
    "rightarrow": "→",
    "->": "→",
    "to": "→",
    ">->": "↣",
    "rightarrowtail": "↣",
    "->>": "↠",
    "twoheadrightarrow": "↠",
    ">->>": "⤖",
    "twoheadrightarrowtail": "⤖",
    "|->": "↦",
    "mapsto": "↦",
    "larr": "←",
    "leftarrow": "←",
    "<-": "←",
    "harr": "↔",
    "leftrightarrow": "↔",
    "<->": "↔",
    "lArr": "⇐",
    "Leftarrow": "⇐",
    "<==": "⇐",
}

LEFT_BRACKETS: dict[str, str] = {
    "(": "(",
    "left(": "(",
    "[": "[",
    "left[": "[",
    "{": "{",
    "{:": "",
    "": "",
    "(:": "⟨",
    "langle": "⟨",
    "<<": "⟨",
    "|__": "⌊",
    "lfloor": "⌊",
    "|~": "⌈",
    "lceiling": "⌈",
    "|:": "|",
    "|": "|",
}

RIGHT_BRACKETS: dict[str, str] = {
    ")": ")",
    "right)": ")",
    "]": "]",
    "right]": "]",
    "}": "}",
    ":}": "",
    "": "",
    ":)": "⟩",
    "rangle": "⟩",
    ">>": "⟩",
    "__|": "⌋",
    "rfloor": "⌋",
    "~|": "⌉",
    "rceiling": "⌉",
    ":|": "|",
    "|": "|",
}


def left_bracket_str(token: str) -> str:
    """Return the opening string rendered for a left bracket token."""
    try:
        return LEFT_BRACKETS[token]
    except KeyError:
        raise UnmappedBracketError(token, side="left") from None


def right_bracket_str(token: str) -> str:
    """Return the closing string rendered for a right bracket token."""
    try:
        return RIGHT_BRACKETS[token]
    except KeyError:
        raise UnmappedBracketError(token, side="right") from None


def is_shortcode(token: str) -> bool:
    """Return True when ``token`` is shaped like an emoji shortcode ``:name:``."""
    return len(token) > 2 and token.startswith(":") and token.endswith(":")


def symbol_str(token: str, skin_tone: SkinTone = SkinTone.DEFAULT) -> str:
    """Return the Unicode string for a symbol token.

    Tokens missing from :data:`SYMBOLS` are treated as emoji shortcodes and
    resolved with ``skin_tone``, falling back to the toneless glyph when the
    emoji has no variant for that tone.
    """
    glyph = SYMBOLS.get(token)
    if glyph is not None:
        return glyph
    if is_shortcode(token):
        emoji_glyph = lookup_emoji(token[1:-1], skin_tone)
        if emoji_glyph is not None:
            return emoji_glyph
    raise UnknownSymbolError(token)


__all__ = [
    "LEFT_BRACKETS",
    "RIGHT_BRACKETS",
    "SYMBOLS",
    "is_shortcode",
    "left_bracket_str",
    "right_bracket_str",
    "symbol_str",
]

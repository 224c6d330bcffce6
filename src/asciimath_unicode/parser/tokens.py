"""Token vocabulary recognised by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cache

from asciimath_unicode.core.emoji import emoji_shortcodes


class TokenKind(Enum):
    FRAC = "frac"
    SUPER = "super"
    SUB = "sub"
    SEP = "sep"
    FUNCTION = "function"
    UNARY = "unary"
    BINARY = "binary"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    OPEN_CLOSE_BRACKET = "open_close_bracket"
    SYMBOL = "symbol"
    IDENT = "ident"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str


def _kinds(kind: TokenKind, spellings: str) -> list[tuple[str, TokenKind]]:
    return [(spelling, kind) for spelling in spellings.split()]


UNICODE_TOKENS: tuple[tuple[str, TokenKind], ...] = (
    ("/", TokenKind.FRAC),
    ("^", TokenKind.SUPER),
    ("_", TokenKind.SUB),
    (",", TokenKind.SEP),
    *_kinds(
        TokenKind.FUNCTION,
        "sin cos tan sinh cosh tanh cot sec csc arcsin arccos arctan coth sech csch "
        "exp log ln det gcd lcm Sin Cos Tan Arcsin Arccos Arctan Sinh Cosh Tanh Cot "
        "Sec Csc Log Ln f g",
    ),
    *_kinds(
        TokenKind.UNARY,
        "sqrt abs norm floor ceil Abs hat bar overline vec dot ddot overarc overparen "
        "ul underline ubrace underbrace obrace overbrace text mbox cancel tilde",
    ),
    # fonts
    *_kinds(
        TokenKind.UNARY,
        "bb mathbf sf mathsf bbb mathbb cc mathcal tt mathtt fr mathfrak it mathit",
    ),
    *_kinds(TokenKind.BINARY, "frac root stackrel overset underset color id class"),
    # greek
    *_kinds(
        TokenKind.SYMBOL,
        "alpha Alpha beta Beta chi Chi delta Delta epsi Epsi epsilon Epsilon varepsilon "
        "eta Eta gamma Gamma iota Iota kappa Kappa varkappa lambda Lambda lamda Lamda "
        "mu Mu nu Nu omega Omega phi varphi Phi pi Pi varpi psi Psi rho Rho varrho "
        "sigma Sigma tau Tau theta vartheta Theta Vartheta upsilon Upsilon xi Xi zeta Zeta",
    ),
    # operations
    *_kinds(
        TokenKind.SYMBOL,
        "* cdot ** ast *** star // \\\\ backslash setminus xx times |>< ltimes ><| "
        "rtimes |><| bowtie -: div divide @ circ o+ oplus ox otimes o. odot sum prod "
        "^^ wedge land ^^^ bigwedge vv vee lor vvv bigvee nn cap nnn bigcap uu cup "
        "uuu bigcup",
    ),
    # relations
    *_kinds(
        TokenKind.SYMBOL,
        "= != ne < lt <= le lt= leq > gt mlt ll >= ge gt= geq mgt gg -< prec -lt >- "
        "succ -<= preceq >-= succeq in !in notin sub subset sup supset sube subseteq "
        "supe supseteq -= equiv ~= cong ~~ aprox ~ sim prop propto",
    ),
    # logical
    *_kinds(
        TokenKind.SYMBOL,
        "not neg => implies <=> iff AA forall EE exists !EE notexists _|_ bot TT top "
        "|-- vdash |== models and or if",
    ),
    # misc
    *_kinds(
        TokenKind.SYMBOL,
        ":|: int oint del partial grad nabla +- pm -+ mp O/ emptyset oo infty aleph "
        "... ldots :. therefore :' because /_ angle /_\\ triangle ' prime frown quad "
        "qquad cdots vdots ddots diamond square CC NN QQ RR ZZ ell",
    ),
    ("\\ ", TokenKind.SYMBOL),
    # arrows
    *_kinds(
        TokenKind.SYMBOL,
        "uarr uparrow darr downarrow rarr rightarrow -> to >-> rightarrowtail ->> "
        "twoheadrightarrow >->> twoheadrightarrowtail |-> mapsto larr leftarrow <- "
        "harr leftrightarrow <-> rArr Rightarrow ==> lArr Leftarrow <== hArr "
        "Leftrightarrow <==>",
    ),
    *_kinds(
        TokenKind.OPEN_BRACKET,
        "( [ { |: (: << langle left( left[ {: |__ lfloor |~ lceiling",
    ),
    *_kinds(
        TokenKind.CLOSE_BRACKET,
        ") ] } :| :) >> rangle right) right] :} __| rfloor ~| rceiling",
    ),
    ("|", TokenKind.OPEN_CLOSE_BRACKET),
    *_kinds(TokenKind.IDENT, "dx dy dz dt"),
    # under/over operators stay plain identifiers
    *_kinds(TokenKind.IDENT, "lim Lim dim mod lub glb min max"),
    (":=", TokenKind.IDENT),
)


@cache
def token_table() -> dict[str, TokenKind]:
    """Return every recognised spelling, emoji shortcodes included."""
    table = {shortcode: TokenKind.SYMBOL for shortcode in emoji_shortcodes()}
    table.update(UNICODE_TOKENS)
    return table


@cache
def token_lengths() -> tuple[int, ...]:
    """Return the distinct spelling lengths, longest first."""
    return tuple(sorted({len(spelling) for spelling in token_table()}, reverse=True))


__all__ = [
    "Token",
    "TokenKind",
    "UNICODE_TOKENS",
    "token_lengths",
    "token_table",
]

from __future__ import annotations

import re


_MARKUP_PATTERN = re.compile(r"<[^>]*>")
_HEX_SYMBOL_PATTERN = re.compile(r"^(?:0x)?([0-9a-fA-F]{64})$")
_NON_PRINTABLE_ASCII = re.compile(r"[^\x20-\x7e]")

MIN_SYMBOL_LENGTH = 2
MAX_SYMBOL_LENGTH = 32


def contains_markup(text: str | None) -> bool:
    if not text:
        return False
    return _MARKUP_PATTERN.search(text) is not None


def decode_symbol(raw: str | None) -> str:
    """Normaliza o symbol de um token como reportado pelo subgraph.

    Alguns tokens expoem ``symbol()`` como ``bytes32`` e o subgraph devolve o
    payload hex de 64 caracteres no lugar do texto. Esses sao decodificados
    como UTF-8 sem o padding de NUL. O resultado e reduzido a ASCII imprimivel
    e so e devolvido quando o tamanho fica dentro dos limites de symbol;
    caso contrario devolve string vazia.
    """
    if raw is None:
        return ""

    text = raw
    match = _HEX_SYMBOL_PATTERN.match(raw.strip())
    if match:
        text = bytes.fromhex(match.group(1)).decode("utf-8", errors="replace").replace("\x00", "")

    text = _NON_PRINTABLE_ASCII.sub("", text).strip()
    if MIN_SYMBOL_LENGTH <= len(text) <= MAX_SYMBOL_LENGTH:
        return text
    return ""

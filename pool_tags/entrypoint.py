from __future__ import annotations

from pool_tags.api.deps import build_return_tags_use_case
from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.shared.config import get_settings


def return_tags(chain_id: str | int, api_key: str) -> list[dict[str, str]]:
    """Busca todas as pools do subgraph e devolve no formato de contract tag.

    Levanta ``UnsupportedChainError`` ou ``MissingCredentialError`` antes de
    qualquer request, e ``TagsFetchError`` quando alguma pagina falha; nesse
    caso nenhum resultado parcial e devolvido.
    """
    use_case = build_return_tags_use_case(get_settings())
    result = use_case.execute(ReturnTagsInput(chain_id=chain_id, api_key=api_key))
    return [tag.to_dict() for tag in result.tags]

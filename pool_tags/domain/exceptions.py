from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class UnsupportedChainError(DomainError):
    """Chain solicitada nao e indexada pela fonte de pools."""


class MissingCredentialError(DomainError):
    """Credencial de acesso ao subgraph nao informada."""


class SubgraphConfigurationError(DomainError):
    """Endpoint do subgraph nao pode ser resolvido a partir das settings."""


class PoolSourceError(DomainError):
    """Base para falhas ao buscar uma pagina de pools."""


class TransportError(PoolSourceError):
    """Camada de rede ou HTTP retornou falha."""


class SourceError(PoolSourceError):
    """Resposta GraphQL trouxe lista de erros."""


class MalformedResponseError(PoolSourceError):
    """Resposta sem o payload de dados esperado."""


class TagsFetchError(DomainError):
    """Paginacao abortada porque uma pagina nao pode ser obtida."""

"""Taxonomy browsing session: per-type index, expansion state, query and selection."""

import logging
from dataclasses import dataclass

from domain.schemas import FilterResult, TaxonomyCategory, TaxonomyType, TreeSummary, VisibleNode, coerce_taxonomy_type
from domain.taxonomy import (
    CategorySelector,
    ExpansionState,
    SelectCallback,
    TaxonomyDataset,
    TreeIndex,
    build_visible_nodes,
    filter_taxonomy,
    normalize_query,
    summarize,
)
from infrastructure.config.models import BrowserConfig
from infrastructure.observability import set_log_context

logger = logging.getLogger(__name__)


@dataclass
class _TypeSession:
    """Everything owned by one taxonomy type; nothing here is shared across types."""

    index: TreeIndex
    expansion: ExpansionState
    selector: CategorySelector


class TaxonomyBrowser:
    """
    Tabbed skill/domain browser state.

    Indexes are built lazily the first time a type is browsed and reused for
    the rest of the session. Switching type clears the query; each type keeps
    its own expansion state.
    """

    def __init__(
        self,
        dataset: TaxonomyDataset,
        *,
        default_type: TaxonomyType | str = TaxonomyType.SKILL,
        on_select: SelectCallback | None = None,
        match_slugs: bool = False,
    ) -> None:
        self._dataset = dataset
        self._on_select = on_select
        self._match_slugs = match_slugs
        self._sessions: dict[TaxonomyType, _TypeSession] = {}

        self._active_type = coerce_taxonomy_type(default_type)
        self._query = ""
        self._result = filter_taxonomy("", self._session().index, match_slugs=match_slugs)
        set_log_context(taxonomy_type=self._active_type.value)

    @classmethod
    def from_config(
        cls,
        cfg: BrowserConfig,
        dataset: TaxonomyDataset,
        *,
        on_select: SelectCallback | None = None,
    ) -> "TaxonomyBrowser":
        return cls(dataset, default_type=cfg.default_type, on_select=on_select, match_slugs=cfg.match_slugs)

    def _session(self, taxonomy_type: TaxonomyType | None = None) -> _TypeSession:
        t = self._active_type if taxonomy_type is None else taxonomy_type
        session = self._sessions.get(t)
        if session is None:
            index = TreeIndex.build(self._dataset.get_tree(t))
            session = _TypeSession(
                index=index,
                expansion=ExpansionState(index),
                selector=CategorySelector(index, t, on_select=self._on_select),
            )
            self._sessions[t] = session
            logger.debug("Indexed %s taxonomy: %d categories", t.value, index.count_all())
        return session

    # ---- Type / query ----

    @property
    def active_type(self) -> TaxonomyType:
        return self._active_type

    @property
    def query(self) -> str:
        return self._query

    @property
    def filter_result(self) -> FilterResult:
        return self._result

    @property
    def version(self) -> str | None:
        """Schema version of the active taxonomy."""
        return self._dataset.version(self._active_type)

    def index(self, taxonomy_type: TaxonomyType | str | None = None) -> TreeIndex:
        t = self._active_type if taxonomy_type is None else coerce_taxonomy_type(taxonomy_type)
        return self._session(t).index

    def expansion(self, taxonomy_type: TaxonomyType | str | None = None) -> ExpansionState:
        t = self._active_type if taxonomy_type is None else coerce_taxonomy_type(taxonomy_type)
        return self._session(t).expansion

    def switch_type(self, taxonomy_type: TaxonomyType | str) -> None:
        """
        Raises:
            InvalidTypeError: If the type is unknown or has no data loaded
        """
        t = coerce_taxonomy_type(taxonomy_type)
        self._session(t)
        self._active_type = t
        set_log_context(taxonomy_type=t.value)
        self.set_query("")
        logger.info("Switched to %s taxonomy", t.value)

    def set_query(self, query: str | None) -> FilterResult:
        self._query = normalize_query(query)
        self._result = filter_taxonomy(self._query, self._session().index, match_slugs=self._match_slugs)
        if self._result.is_active:
            logger.debug(
                "Query %r matched %d of %d categories",
                self._query,
                self._result.match_count,
                self._result.total_count,
            )
        return self._result

    # ---- Expansion ----

    def toggle(self, slug: str) -> bool:
        return self._session().expansion.toggle(slug)

    def expand_all(self) -> None:
        self._session().expansion.expand_all()

    def collapse_all(self) -> None:
        self._session().expansion.collapse_all()

    # ---- Selection ----

    def select(self, slug: str) -> TaxonomyCategory:
        return self._session().selector.select(slug)

    # ---- Rendering ----

    def visible_nodes(self) -> list[VisibleNode]:
        session = self._session()
        return build_visible_nodes(session.index, session.expansion, self._result)

    def summary(self) -> TreeSummary:
        return summarize(self._result, self.visible_nodes())

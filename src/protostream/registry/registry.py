"""Screen Registry - ordered, id-keyed store of screens."""

from collections.abc import Iterable, Iterator

from ..protocol import Anomaly, AnomalyKind, ParseResult, ScreenBlock, ScreenMode, screen_id
from .models import RegistrySnapshot, ScreenEntity


class ScreenRegistry:
    """
    Applies screen blocks with create/edit semantics.

    Identity is the derived id, not the delimiter used: a second SCREEN_START
    for an existing screen is an edit, and a SCREEN_EDIT for an unknown screen
    is a create. Edits replace markup but keep position and order. At most one
    screen holds the root flag; the latest root marker wins.
    """

    def __init__(self) -> None:
        self._screens: dict[str, ScreenEntity] = {}
        self._root_id: str | None = None
        self.anomalies: list[Anomaly] = []

    @classmethod
    def from_entities(cls, entities: Iterable[ScreenEntity]) -> "ScreenRegistry":
        """Restore a registry from saved screens (copies, ordered by order)."""
        registry = cls()
        for entity in sorted(entities, key=lambda e: e.order):
            restored = entity.model_copy(update={"order": len(registry._screens)})
            registry._screens[restored.id] = restored
            if restored.is_root:
                registry._set_root(restored)
        return registry

    @classmethod
    def rebuild(
        cls,
        result: ParseResult,
        base: Iterable[ScreenEntity] | None = None,
        include_open: bool = False,
    ) -> "ScreenRegistry":
        """
        Build a registry wholesale from a parse result.

        Args:
            result: Parser output for the full buffer
            base: Screens that existed before this generation
            include_open: Also apply the still-streaming screen
        """
        registry = cls.from_entities(base) if base is not None else cls()
        for block in result.blocks:
            if block.closed or include_open:
                registry.upsert(block)
        return registry

    def upsert(self, block: ScreenBlock) -> ScreenEntity:
        """Create or replace the screen a block refers to."""
        sid = screen_id(block.name)
        existing = self._screens.get(sid)

        if existing is None:
            entity = self._create(sid, block)
        else:
            entity = existing
            if existing.name != block.name:
                self._flag(AnomalyKind.ID_COLLISION, block,
                           f"'{block.name}' collides with '{existing.name}' ({sid}); applied as an edit")
            elif block.mode is ScreenMode.CREATE:
                self._flag(AnomalyKind.DUPLICATE_START, block,
                           f"'{block.name}' already exists; applied as an edit")
            entity.markup = block.markup

        if block.is_root:
            self._set_root(entity)
        return entity

    def _create(self, sid: str, block: ScreenBlock) -> ScreenEntity:
        if block.mode is ScreenMode.EDIT:
            self._flag(AnomalyKind.EDIT_UNKNOWN_SCREEN, block,
                       f"Edit of unknown screen '{block.name}'; created instead")

        order = len(self._screens)
        has_cell = block.grid_column is not None and block.grid_row is not None
        entity = ScreenEntity(
            name=block.name,
            id=sid,
            markup=block.markup,
            # Unpositioned screens stack in the first column
            grid_column=block.grid_column if has_cell else 0,
            grid_row=block.grid_row if has_cell else order,
            order=order,
        )
        self._screens[sid] = entity
        return entity

    def _set_root(self, entity: ScreenEntity) -> None:
        if self._root_id is not None and self._root_id != entity.id:
            self._screens[self._root_id].is_root = False
        entity.is_root = True
        self._root_id = entity.id

    def _flag(self, kind: AnomalyKind, block: ScreenBlock, message: str) -> None:
        self.anomalies.append(Anomaly(kind, message, screen_name=block.name, offset=block.offset))

    def all(self) -> list[ScreenEntity]:
        """Screens in insertion order."""
        return list(self._screens.values())

    def root_screen(self) -> ScreenEntity | None:
        """The entry screen: root-flagged, else the first created."""
        if self._root_id is not None:
            return self._screens[self._root_id]
        return next(iter(self._screens.values()), None)

    def by_id(self, screen_id_: str) -> ScreenEntity | None:
        return self._screens.get(screen_id_)

    def by_name(self, name: str) -> ScreenEntity | None:
        return self._screens.get(screen_id(name))

    def snapshot(self) -> RegistrySnapshot:
        root = self.root_screen()
        return RegistrySnapshot(
            screens=[screen.model_copy() for screen in self._screens.values()],
            entry_id=root.id if root else None,
        )

    def __len__(self) -> int:
        return len(self._screens)

    def __iter__(self) -> Iterator[ScreenEntity]:
        return iter(self.all())

    def __contains__(self, screen_id_: object) -> bool:
        return screen_id_ in self._screens

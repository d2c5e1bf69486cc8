"""
Grid entity - the cell-by-cell projection of the entities on the board.

The grid is never edited in place. It is rebuilt from the snake, the
food and the obstacles every time one of them changes.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from ..errors import ProjectionError
from .constants import CellContent
from .position import Position, in_bounds
from .snake import Food, Snake


class GridDimensions(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class Cell:
    content: CellContent
    position: Position


@dataclass(frozen=True)
class Grid:
    """
    Fixed width x height array of cells.

    Attributes:
        dimensions: (width, height) of the board
        cells: rows of cells, indexed as cells[y][x]
    """

    dimensions: GridDimensions
    cells: Tuple[Tuple[Cell, ...], ...]

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height

    def cell_at(self, position: Position) -> Cell:
        return self.cells[position.y][position.x]

    def content_at(self, position: Position) -> CellContent:
        return self.cell_at(position).content

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def empty_positions(self) -> List[Position]:
        """All EMPTY cells in row-major order."""
        return [cell.position for cell in self.iter_cells() if cell.content is CellContent.EMPTY]


def empty_grid(width: int, height: int) -> Grid:
    cells = tuple(
        tuple(Cell(CellContent.EMPTY, Position(x, y)) for x in range(width))
        for y in range(height)
    )
    return Grid(GridDimensions(width, height), cells)


def project(
    snake: Snake,
    food: Optional[Food],
    obstacles: Iterable[Position],
    dimensions: GridDimensions,
) -> Grid:
    """
    Build the grid for the given entities.

    Raises ProjectionError if two entities claim the same cell or an
    entity lies outside the grid; a correct engine never asks for either.
    """
    width, height = dimensions
    layout = {}

    def place(position: Position, content: CellContent) -> None:
        if not in_bounds(position, width, height):
            raise ProjectionError(f"{content.value} at {position} is outside a {width}x{height} grid")
        if position in layout:
            raise ProjectionError(
                f"{content.value} and {layout[position].value} both claim cell {position}"
            )
        layout[position] = content

    place(snake.head, CellContent.HEAD)
    for segment in snake.body:
        place(segment, CellContent.BODY)
    for obstacle in obstacles:
        place(obstacle, CellContent.OBSTACLE)
    if food is not None:
        place(food.position, CellContent.FOOD)

    cells = tuple(
        tuple(
            Cell(layout.get(Position(x, y), CellContent.EMPTY), Position(x, y))
            for x in range(width)
        )
        for y in range(height)
    )
    return Grid(GridDimensions(width, height), cells)

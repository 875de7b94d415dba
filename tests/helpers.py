from catanalyzer.domain.board import Board, Resource, build_board


def uniform_board(resource: Resource = Resource.WHEAT, number: int = 6, radius: int = 2) -> Board:
    board = build_board(radius)
    for tile in board.tiles:
        board.set_resource(tile.q, tile.r, resource)
        board.set_number(tile.q, tile.r, number)
    return board


def paint(board: Board, q: int, r: int, resource: Resource, number: int | None = None) -> None:
    board.set_resource(q, r, resource)
    if number is not None:
        board.set_number(q, r, number)

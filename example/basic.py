#!/usr/bin/python3

from jitterpack import PlacementSearch
import trio
import logging

# Tiles made of cells, anchored at a grid point. The search only asks them
# whether they fit; it doesn't care what they look like.

class Board:
    def __init__(self):
        self.cells = {}

class Tile:
    def __init__(self, board, name, cells):
        self.board = board
        self.name = name
        self.cells = cells

    def __repr__(self):
        return "Tile‹%s›" % (self.name,)

    def _at(self, p):
        return [(p.x+x, p.y+y) for x,y in self.cells]

    def intersects(self, p):
        return any(c in self.board.cells for c in self._at(p))

    def place(self, p):
        for c in self._at(p):
            self.board.cells[c] = self.name

def show(board):
    xs = [x for x,y in board.cells]
    ys = [y for x,y in board.cells]
    for y in range(min(ys),max(ys)+1):
        print("".join(board.cells.get((x,y), ".") for x in range(min(xs),max(xs)+1)))

async def main():
    board = Board()
    ps = PlacementSearch(max_ring=10)
    shapes = {
        "I": [(0,0),(0,1),(0,2),(0,3)],
        "L": [(0,0),(0,1),(0,2),(1,2)],
        "O": [(0,0),(1,0),(0,1),(1,1)],
        "T": [(0,0),(1,0),(2,0),(1,1)],
        "S": [(1,0),(2,0),(0,1),(1,1)],
    }
    for n in range(3):
        for name,cells in shapes.items():
            p = await ps.place(Tile(board, name, cells))
            print(name, "at", p)
    show(board)

logging.basicConfig(level=logging.INFO)
trio.run(main)

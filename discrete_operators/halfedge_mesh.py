from torch import arange, as_tensor, cat, IntTensor, long, Tensor, tensor
from typing import List, Optional


class HalfedgeMesh:
    """Read-only halfedge adjacency over a triangle mesh.

    Halfedge ``3 * f + c`` runs from corner ``c`` to corner ``c + 1`` of face ``f``.
    Vertex, face, halfedge and edge handles are plain integers. The discrete operators
    only use ``position``, ``halfedges_around``, ``source``, ``target``, ``next``,
    ``opposite``, ``face``, ``halfedge``, ``vertices``, ``vertex_count``, ``stable_index``
    and ``dtype``, so any object providing those can stand in for this class.
    """

    def __init__(self, points: Tensor, faces: IntTensor, dtype=None):
        faces = as_tensor(faces, dtype=long).reshape(-1, 3)
        assert len(points.shape) == 2 and points.shape[-1] == 3
        if len(faces) > 0:
            assert faces.min() >= 0
            assert faces.max() < len(points)

        self.points = points if dtype is None else points.to(dtype)
        self.faces = faces
        self.dtype = self.points.dtype

        self.num_faces = len(faces)
        self.num_halfedges = 3 * self.num_faces
        self.num_vertices = len(points)

        # Halfedge selectors
        idxs = arange(self.num_halfedges).reshape(-1, 3)
        self.next_idxs = cat([idxs[:, 1:], idxs[:, :1]], dim=-1).reshape(-1)

        # Vertices to halfedges
        self.tail_vertex_idxs = faces.reshape(-1)
        self.tip_vertex_idxs = cat([faces[:, 1:], faces[:, :1]], dim=-1).reshape(-1)

        self._tails = self.tail_vertex_idxs.tolist()
        self._tips = self.tip_vertex_idxs.tolist()
        self._nexts = self.next_idxs.tolist()

        # Twins, -1 on boundary halfedges
        halfedge_of_pair = {}
        for h, pair in enumerate(zip(self._tails, self._tips)):
            assert pair not in halfedge_of_pair
            halfedge_of_pair[pair] = h
        self._twins = [halfedge_of_pair.get((tip, tail), -1) for tail, tip in zip(self._tails, self._tips)]
        self.twin_idxs = tensor(self._twins, dtype=long)

        # One representative halfedge per undirected edge
        self._edges = [h for h, twin in enumerate(self._twins) if twin == -1 or h < twin]
        self.edges = tensor(self._edges, dtype=long)
        self.num_edges = len(self._edges)

        self._one_rings = self._build_one_rings()

    def _build_one_rings(self) -> List[List[int]]:
        incoming = [[] for _ in range(self.num_vertices)]
        for h, tip in enumerate(self._tips):
            incoming[tip].append(h)

        one_rings = []
        for hs in incoming:
            if len(hs) == 0:
                one_rings.append([])
                continue

            # Start a boundary fan at its first face so the walk reaches every face
            boundary_hs = [h for h in hs if self._twins[h] == -1]
            start = boundary_hs[0] if len(boundary_hs) > 0 else hs[0]

            ring = [start]
            visited = {start}
            h = self._twins[self._nexts[start]]
            while h != -1 and h not in visited:
                ring.append(h)
                visited.add(h)
                h = self._twins[self._nexts[h]]

            ring += [h for h in hs if h not in visited]
            one_rings.append(ring)

        return one_rings

    def vertices(self) -> range:
        return range(self.num_vertices)

    def vertex_count(self) -> int:
        return self.num_vertices

    def stable_index(self, v: int) -> int:
        return v

    def position(self, v: int) -> Tensor:
        return self.points[v]

    def halfedges_around(self, v: int) -> List[int]:
        return self._one_rings[v]

    def source(self, h: int) -> int:
        return self._tails[h]

    def target(self, h: int) -> int:
        return self._tips[h]

    def next(self, h: int) -> int:
        return self._nexts[h]

    def opposite(self, h: int) -> Optional[int]:
        twin = self._twins[h]
        return None if twin == -1 else twin

    def face(self, h: int) -> int:
        return h // 3

    def halfedge(self, f: int) -> int:
        return 3 * f

    def edge_halfedge(self, e: int) -> int:
        return self._edges[e]

    def is_boundary_vertex(self, v: int) -> bool:
        return any(self._twins[h] == -1 for h in self._one_rings[v])

    def embedding_to_halfedge_vectors(self, fs: Optional[Tensor] = None) -> Tensor:
        fs = self.points if fs is None else fs
        return fs[..., self.tip_vertex_idxs, :] - fs[..., self.tail_vertex_idxs, :]

import pytest
from discrete_operators import HalfedgeMesh
from torch import arange, cat, cos, float64, long, pi, sin, sqrt, stack, tensor, zeros
from torch.linalg import norm


phi = (1 + 5 ** 0.5) / 2


def make_cube():
    vertices = tensor([
        [0., 0., 0.], [1., 0., 0.], [1., 1., 0.], [0., 1., 0.],
        [0., 0., 1.], [1., 0., 1.], [1., 1., 1.], [0., 1., 1.]
    ], dtype=float64)
    faces = tensor([
        [0, 2, 1], [0, 3, 2],
        [4, 5, 6], [4, 6, 7],
        [0, 1, 5], [0, 5, 4],
        [3, 7, 6], [3, 6, 2],
        [0, 4, 7], [0, 7, 3],
        [1, 2, 6], [1, 6, 5]
    ], dtype=long)
    return HalfedgeMesh(vertices, faces)


def make_icosahedron(radius: float = 1.):
    vertices = tensor([
        [-1., phi, 0.], [1., phi, 0.], [-1., -phi, 0.], [1., -phi, 0.],
        [0., -1., phi], [0., 1., phi], [0., -1., -phi], [0., 1., -phi],
        [phi, 0., -1.], [phi, 0., 1.], [-phi, 0., -1.], [-phi, 0., 1.]
    ], dtype=float64)
    vertices = radius * vertices / norm(vertices, dim=-1, keepdims=True)
    faces = tensor([
        [0, 11, 5], [0, 5, 1], [0, 1, 7], [0, 7, 10], [0, 10, 11],
        [1, 5, 9], [5, 11, 4], [11, 10, 2], [10, 7, 6], [7, 1, 8],
        [3, 9, 4], [3, 4, 2], [3, 2, 6], [3, 6, 8], [3, 8, 9],
        [4, 9, 5], [2, 4, 11], [6, 2, 10], [8, 6, 7], [9, 8, 1]
    ], dtype=long)
    return HalfedgeMesh(vertices, faces)


def make_sphere(radius: float = 1., num_subdivisions: int = 2):
    ico = make_icosahedron()
    vertices = list(ico.points)
    faces = ico.faces.tolist()

    for _ in range(num_subdivisions):
        midpoint_idxs = {}

        def midpoint_idx(i, j):
            key = (min(i, j), max(i, j))
            if key not in midpoint_idxs:
                midpoint_idxs[key] = len(vertices)
                vertices.append((vertices[i] + vertices[j]) / 2)
            return midpoint_idxs[key]

        new_faces = []
        for a, b, c in faces:
            ab = midpoint_idx(a, b)
            bc = midpoint_idx(b, c)
            ca = midpoint_idx(c, a)
            new_faces += [[a, ab, ca], [b, bc, ab], [c, ca, bc], [ab, bc, ca]]
        faces = new_faces

    vertices = stack(vertices)
    vertices = radius * vertices / norm(vertices, dim=-1, keepdims=True)
    return HalfedgeMesh(vertices, tensor(faces, dtype=long))


def make_fan(num_sides: int = 6, height: float = 0.):
    # Center vertex 0 at height, ring vertices on the unit circle in the xy-plane
    thetas = 2 * pi * arange(num_sides, dtype=float64) / num_sides
    ring = stack([cos(thetas), sin(thetas), zeros(num_sides, dtype=float64)], dim=-1)
    center = tensor([[0., 0., height]], dtype=float64)
    vertices = cat([center, ring])
    faces = tensor([[0, k, k % num_sides + 1] for k in range(1, num_sides + 1)], dtype=long)
    return HalfedgeMesh(vertices, faces)


@pytest.fixture
def cube():
    return make_cube()


@pytest.fixture
def icosahedron():
    return make_icosahedron()


@pytest.fixture
def sphere():
    return make_sphere(radius=2.)


@pytest.fixture
def fan():
    return make_fan()


@pytest.fixture
def collinear_triangle():
    vertices = tensor([[0., 0., 0.], [1., 0., 0.], [2., 0., 0.]], dtype=float64)
    return HalfedgeMesh(vertices, tensor([[0, 1, 2]]))


@pytest.fixture
def obtuse_triangle():
    # Obtuse at vertex 0
    vertices = tensor([[0., 0., 0.], [1., 0., 0.], [-1., 0.5, 0.]], dtype=float64)
    return HalfedgeMesh(vertices, tensor([[0, 1, 2]]))


@pytest.fixture
def icosahedron_edge_length():
    return sqrt(tensor(2 * (1 - 1 / 5 ** 0.5), dtype=float64))

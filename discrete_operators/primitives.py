from discrete_operators.errors import DegenerateFaceWarning, InvalidTopologyError
from torch import dot, finfo, sqrt, Tensor, zeros_like
from torch.linalg import cross, norm
from typing import Tuple
from warnings import warn


def area(p1: Tensor, p2: Tensor, p3: Tensor) -> Tensor:
    return norm(cross(p2 - p1, p3 - p1)) / 2


def cosine(p1: Tensor, p2: Tensor, p3: Tensor) -> Tensor:
    # Angle at p2
    u = p1 - p2
    w = p3 - p2
    return dot(u, w) / (norm(u) * norm(w))


def cos_to_cot(cos: Tensor) -> Tensor:
    # Non-finite at 0 and pi
    return cos / sqrt(1 - cos * cos)


def is_obtuse(p1: Tensor, p2: Tensor, p3: Tensor) -> bool:
    # Angle at p2
    return bool(dot(p1 - p2, p3 - p2) < 0)


def midpoint(p1: Tensor, p2: Tensor) -> Tensor:
    return (p1 + p2) / 2


def barycenter(p1: Tensor, p2: Tensor, p3: Tensor) -> Tensor:
    return (p1 + p2 + p3) / 3


def circumcenter(p1: Tensor, p2: Tensor, p3: Tensor) -> Tensor:
    a = p1 - p3
    b = p2 - p3
    a_cross_b = cross(a, b)
    return p3 + cross(dot(a, a) * b - dot(b, b) * a, a_cross_b) / (2 * dot(a_cross_b, a_cross_b))


def halfedge_corners(he: int, mesh) -> Tuple[Tensor, Tensor, Tensor]:
    he_next = mesh.next(he)
    if mesh.next(mesh.next(he_next)) != he:
        raise InvalidTopologyError(f'Face {mesh.face(he)} is not a triangle')

    p1 = mesh.position(mesh.source(he))
    p2 = mesh.position(mesh.target(he))
    p3 = mesh.position(mesh.target(he_next))
    return p1, p2, p3


def edge_length(he: int, mesh) -> Tensor:
    return norm(mesh.position(mesh.source(he)) - mesh.position(mesh.target(he)))


def face_area(f: int, mesh) -> Tensor:
    return area(*halfedge_corners(mesh.halfedge(f), mesh))


def face_normal(f: int, mesh) -> Tensor:
    p1, p2, p3 = halfedge_corners(mesh.halfedge(f), mesh)
    u_12 = p2 - p1
    u_13 = p3 - p1
    N = cross(u_12, u_13)
    N_norm = norm(N)

    if N_norm <= finfo(N.dtype).eps * norm(u_12) * norm(u_13):
        warn(f'Degenerate face {f}, normal is set to zero', DegenerateFaceWarning)
        return zeros_like(N)

    return N / N_norm


def edge_lengths(mesh) -> Tensor:
    us = mesh.embedding_to_halfedge_vectors()
    return norm(us[mesh.edges], dim=-1)


def face_areas(mesh) -> Tensor:
    p1s, p2s, p3s = mesh.points[mesh.faces].unbind(dim=-2)
    return norm(cross(p2s - p1s, p3s - p1s, dim=-1), dim=-1) / 2


def face_normals(mesh) -> Tensor:
    p1s, p2s, p3s = mesh.points[mesh.faces].unbind(dim=-2)
    u_12s = p2s - p1s
    u_13s = p3s - p1s
    Ns = cross(u_12s, u_13s, dim=-1)
    N_norms = norm(Ns, dim=-1, keepdims=True)

    is_degenerate = (N_norms <= finfo(mesh.dtype).eps * norm(u_12s, dim=-1, keepdims=True) * norm(u_13s, dim=-1, keepdims=True))[..., 0]
    Ns = Ns / N_norms
    Ns[is_degenerate] = 0.

    if is_degenerate.any():
        degenerate_faces = is_degenerate.nonzero()[:, 0].tolist()
        warn(f'Degenerate faces {degenerate_faces}, normals are set to zero', DegenerateFaceWarning)

    return Ns

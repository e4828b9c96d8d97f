from discrete_operators.errors import DegenerateInputError, InvalidTopologyError
from discrete_operators.primitives import area, barycenter, circumcenter, cos_to_cot, cosine, face_area, face_normals, halfedge_corners, is_obtuse, midpoint
from enum import Enum
from torch import arccos, dot, maximum, minimum, pi, stack, Tensor, tensor, zeros, zeros_like
from torch.linalg import norm
from typing import List, Optional, Tuple


class VertexNormal(Enum):
    constant = 'constant'
    face_area = 'face_area'
    incident_angle = 'incident_angle'


class VertexArea(Enum):
    barycentric = 'barycentric'
    voronoi = 'voronoi'
    mixed = 'mixed'


def cotangent_weight(he: int, mesh) -> Tensor:
    # cot(alpha) + cot(beta) for the angles facing the edge of he, beta is 0 on a boundary edge
    v = mesh.target(he)
    vj = mesh.source(he)
    va = mesh.target(mesh.next(he))
    p = mesh.position(v)
    pj = mesh.position(vj)

    weight = cos_to_cot(cosine(p, mesh.position(va), pj))

    twin = mesh.opposite(he)
    if twin is not None:
        vb = mesh.target(mesh.next(twin))
        weight = weight + cos_to_cot(cosine(p, mesh.position(vb), pj))

    return weight


def cotangent_weights(v: int, mesh) -> List[Tuple[int, Tensor]]:
    # One (neighbor, weight) pair per edge at v, a boundary vertex also has the edge of its outgoing boundary halfedge
    weights = []
    for he in mesh.halfedges_around(v):
        weights.append((mesh.source(he), cotangent_weight(he, mesh)))

        he_out = mesh.next(he)
        if mesh.opposite(he_out) is None:
            weights.append((mesh.target(he_out), cotangent_weight(he_out, mesh)))

    return weights


def vertex_normal(v: int, mesh, fnmap: Tensor, weight: VertexNormal = VertexNormal.face_area) -> Tensor:
    weight = VertexNormal(weight)
    p = mesh.position(v)

    normal = zeros_like(p)
    for he in mesh.halfedges_around(v):
        f = mesh.face(he)
        fn = fnmap[f]

        if weight == VertexNormal.constant:
            normal = normal + fn

        elif weight == VertexNormal.face_area:
            normal = normal + face_area(f, mesh) * fn

        else:
            # The cosine of the corner angle is used as the weight
            u_1 = mesh.position(mesh.source(he)) - p
            u_2 = mesh.position(mesh.target(mesh.next(he))) - p
            normal = normal + dot(u_1 / norm(u_1), u_2 / norm(u_2)) * fn

    normal_norm = norm(normal)
    if normal_norm == 0:
        raise DegenerateInputError(f'Vertex {v} has a zero accumulated normal')

    return normal / normal_norm


def vertex_area(v: int, mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    method = VertexArea(method)
    hes = mesh.halfedges_around(v)
    if len(hes) == 0:
        raise InvalidTopologyError(f'Vertex {v} has an empty one-ring')

    A = zeros((), dtype=mesh.dtype)
    for he in hes:
        # p2 is v
        p1, p2, p3 = halfedge_corners(he, mesh)
        mid1 = midpoint(p2, p1)
        mid2 = midpoint(p2, p3)

        if method == VertexArea.barycentric:
            center = barycenter(p1, p2, p3)

        elif method == VertexArea.voronoi:
            center = circumcenter(p1, p2, p3)

        elif is_obtuse(p1, p2, p3):
            center = midpoint(p1, p3)

        elif is_obtuse(p2, p3, p1) or is_obtuse(p3, p1, p2):
            A = A + area(mid1, p2, mid2)
            continue

        else:
            center = circumcenter(p1, p2, p3)

        A = A + area(mid1, p2, center) + area(mid2, center, p2)

    return A


def laplace_beltrami(v: int, mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    p = mesh.position(v)

    flow = zeros_like(p)
    for vj, weight in cotangent_weights(v, mesh):
        flow = flow + (mesh.position(vj) - p) * weight

    return flow / (2 * vertex_area(v, mesh, method))


def angle_defect(v: int, mesh) -> Tensor:
    p = mesh.position(v)
    one = tensor(1., dtype=mesh.dtype)

    defect = tensor(2 * pi, dtype=mesh.dtype)
    for he in mesh.halfedges_around(v):
        cos_theta = cosine(mesh.position(mesh.source(he)), p, mesh.position(mesh.target(mesh.next(he))))
        cos_theta = minimum(maximum(cos_theta, -one), one)
        defect = defect - arccos(cos_theta)

    return defect


def gaussian_curvature(v: int, mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    return angle_defect(v, mesh) / vertex_area(v, mesh, method)


def mean_curvature(v: int, mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    return 0.5 * norm(laplace_beltrami(v, mesh, method))


def _stack_over_vertices(values: list, mesh, shape: tuple = ()) -> Tensor:
    if len(values) == 0:
        return zeros((0,) + shape, dtype=mesh.dtype)
    return stack(values)


def vertex_normals(mesh, weight: VertexNormal = VertexNormal.face_area, fnmap: Optional[Tensor] = None) -> Tensor:
    fnmap = face_normals(mesh) if fnmap is None else fnmap
    return _stack_over_vertices([vertex_normal(v, mesh, fnmap, weight) for v in mesh.vertices()], mesh, (3,))


def vertex_areas(mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    return _stack_over_vertices([vertex_area(v, mesh, method) for v in mesh.vertices()], mesh)


def gaussian_curvatures(mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    return _stack_over_vertices([gaussian_curvature(v, mesh, method) for v in mesh.vertices()], mesh)


def mean_curvatures(mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    return _stack_over_vertices([mean_curvature(v, mesh, method) for v in mesh.vertices()], mesh)

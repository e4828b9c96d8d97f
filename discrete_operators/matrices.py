from discrete_operators.primitives import cos_to_cot
from discrete_operators.vertex_properties import cotangent_weights, vertex_area, vertex_areas, VertexArea
from torch import isfinite, long, sparse_coo_tensor, stack, Tensor, tensor, zeros
from torch.linalg import norm
from torch.sparse import spdiags, sum as sparse_sum


def cotangent_matrix(mesh, verbose: bool = False) -> Tensor:
    n = mesh.vertex_count()
    L = zeros(n, n, dtype=mesh.dtype)

    for vi in mesh.vertices():
        i = mesh.stable_index(vi)
        row_sum = 0.
        for vj, weight in cotangent_weights(vi, mesh):
            j = mesh.stable_index(vj)
            value = weight / 2
            L[i, j] = value
            row_sum = row_sum + value
        L[i, i] = -row_sum

    if verbose:
        print('non-finite entries:', (~isfinite(L)).sum().item())

    return L


def mass_matrix(mesh, method: VertexArea = VertexArea.mixed) -> Tensor:
    n = mesh.vertex_count()
    M = zeros(n, n, dtype=mesh.dtype)

    for v in mesh.vertices():
        i = mesh.stable_index(v)
        M[i, i] = vertex_area(v, mesh, method)

    return M


def _empty_sparse(mesh):
    return sparse_coo_tensor(zeros(2, 0, dtype=long), zeros(0, dtype=mesh.dtype), (0, 0))


def sparse_cotangent_matrix(mesh):
    n = mesh.num_vertices
    if n == 0:
        return _empty_sparse(mesh)

    # Angle facing halfedge ij sits at k, between halfedges jk and ki
    us = mesh.embedding_to_halfedge_vectors()
    u_jks = us[mesh.next_idxs]
    u_kis = us[mesh.next_idxs[mesh.next_idxs]]
    cos_alphas = (-u_jks * u_kis).sum(dim=-1) / (norm(u_jks, dim=-1) * norm(u_kis, dim=-1))
    cot_alphas = cos_to_cot(cos_alphas)

    off_diag_L = sparse_coo_tensor(stack([mesh.tail_vertex_idxs, mesh.tip_vertex_idxs]), cot_alphas / 2, (n, n))
    off_diag_L = off_diag_L + off_diag_L.T
    diag_L = spdiags(sparse_sum(off_diag_L, dim=1).to_dense(), tensor(0), (n, n))
    L = (off_diag_L - diag_L).coalesce()

    return L


def sparse_mass_matrix(mesh, method: VertexArea = VertexArea.mixed):
    n = mesh.num_vertices
    if n == 0:
        return _empty_sparse(mesh)

    return spdiags(vertex_areas(mesh, method), tensor(0), (n, n))

from discrete_operators.errors import DegenerateFaceWarning, DegenerateInputError, InvalidTopologyError
from discrete_operators.halfedge_mesh import HalfedgeMesh
from discrete_operators.primitives import edge_length, edge_lengths, face_area, face_areas, face_normal, face_normals
from discrete_operators.vertex_properties import angle_defect, gaussian_curvature, gaussian_curvatures, laplace_beltrami, mean_curvature, mean_curvatures, vertex_area, vertex_areas, vertex_normal, vertex_normals, VertexArea, VertexNormal
from discrete_operators.matrices import cotangent_matrix, mass_matrix, sparse_cotangent_matrix, sparse_mass_matrix

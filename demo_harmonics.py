from argparse import ArgumentParser
from discrete_operators import cotangent_matrix, HalfedgeMesh, mass_matrix, VertexArea
from matplotlib.cm import jet
from matplotlib.colors import Normalize
from matplotlib.pyplot import show, subplots
from potpourri3d import read_mesh
from torch import diag, sqrt, tensor
from torch.linalg import eigh


parser = ArgumentParser()
parser.add_argument('--mesh', default='sphere.obj')
parser.add_argument('--area', choices=[method.value for method in VertexArea], default=VertexArea.mixed.value)
args = parser.parse_args()

vertices, faces = read_mesh('meshes/' + args.mesh)
vertices = tensor(vertices)
faces = tensor(faces)

m = HalfedgeMesh(vertices, faces)
L = cotangent_matrix(m, verbose=True)
vertex_As = diag(mass_matrix(m, args.area))

# -L x = lambda M x, symmetrized with the lumped mass
inv_sqrt_vertex_As = 1 / sqrt(vertex_As)
A = -inv_sqrt_vertex_As.unsqueeze(-1) * L * inv_sqrt_vertex_As.unsqueeze(-2)
A = (A + A.T) / 2

num_rows = 6
num_cols = 8
num_eigs = num_rows * num_cols
eigvals, eigvecs = eigh(A)
eigvals = eigvals[1:(num_eigs + 1)]
eigvecs = inv_sqrt_vertex_As.unsqueeze(-1) * eigvecs[:, 1:(num_eigs + 1)]
print(eigvals)

_, axs = subplots(num_rows, num_cols, figsize=(1.5 * num_cols, 1.5 * num_rows), tight_layout=True, subplot_kw=dict(projection='3d'))
for ax, eigvec in zip(axs.flatten(), eigvecs.T):
    surf = ax.plot_trisurf(*vertices.T, triangles=faces)
    surf.set_fc(jet(Normalize(vmin=eigvec.min(), vmax=eigvec.max())(eigvec[faces].mean(dim=-1))))
    ax.view_init(azim=45)
    ax.set_box_aspect((1, 1, 1))
    ax.axis('off')

show()

from argparse import ArgumentParser
from discrete_operators import gaussian_curvatures, HalfedgeMesh, mean_curvatures, VertexArea
from matplotlib.pyplot import figure, show
from potpourri3d import read_mesh
from torch import tensor

parser = ArgumentParser()
parser.add_argument('--mesh', default='cube.obj')
parser.add_argument('--curvature', choices=['mean', 'gaussian'], default='mean')
parser.add_argument('--area', choices=[method.value for method in VertexArea], default=VertexArea.mixed.value)
args = parser.parse_args()

vertices, faces = read_mesh('meshes/' + args.mesh)
vertices = tensor(vertices)
faces = tensor(faces)

m = HalfedgeMesh(vertices, faces)
if args.curvature == 'mean':
    curvatures = mean_curvatures(m, args.area)
else:
    curvatures = gaussian_curvatures(m, args.area)

fig = figure(figsize=(8, 6))
ax = fig.add_subplot(1, 1, 1, projection='3d')
cbar = ax.scatter(*vertices.T, c=curvatures, cmap='jet')
fig.colorbar(cbar)
ax.view_init(azim=45)
ax.set_box_aspect((1, 1, 1))
ax.axis('off')
show()

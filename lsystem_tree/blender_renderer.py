# ##### BEGIN GPL LICENSE BLOCK #####
#
#  This program is free software; you can redistribute it and/or
#  modify it under the terms of the GNU General Public License
#  as published by the Free Software Foundation; either version 2
#  of the License, or (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software Foundation,
#  Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
#
# ##### END GPL LICENSE BLOCK #####

import bpy
import bmesh
from math import radians
from mathutils import Matrix, Vector

from .config import TreeConfig
from .errors import RenderBackendError
from .renderer import renderer
from .tree import lsystem_tree_generator
from .turtle import uniform_angle_jitter

__all__ = (
    "make_branch_prefab",
    "make_tree_root",
    "blender_renderer",
    "gen_tree",
    )

def make_branch_prefab(name="branch_prefab", segments=12):
    # Radius 1, height 2, along local +Y and centered on the origin.
    mesh = bpy.data.meshes.new(name=name+"_data")
    bm = bmesh.new()
    bmesh.ops.create_cone(bm, cap_ends=True, cap_tris=False, segments=segments, radius1=1.0, radius2=1.0, depth=2.0)
    bmesh.ops.rotate(bm, verts=bm.verts, cent=(0.0, 0.0, 0.0), matrix=Matrix.Rotation(radians(-90), 3, 'X'))
    bm.normal_update()
    bm.to_mesh(mesh)
    bm.free()
    mesh.update()
    return bpy.data.objects.new(name=name, object_data=mesh)

def make_tree_root(context, name="lsystem_tree", location=(0.0, 0.0, 0.0)):
    # The tree grows along +Y; stand it up along Blender's +Z.
    root = bpy.data.objects.new(name=name, object_data=None)
    root.location = location
    root.rotation_euler = (radians(90), 0.0, 0.0)
    context.collection.objects.link(root)
    return root

class blender_renderer(renderer):
    def __init__(self, context):
        self.context = context
        self.default_prefab = None

    def _get_collection(self, parent):
        if parent is not None and len(parent.users_collection) > 0:
            return parent.users_collection[0]
        return self.context.collection

    def instantiate(self, prefab, parent):
        if prefab is None:
            if self.default_prefab is None:
                self.default_prefab = make_branch_prefab()
            prefab = self.default_prefab
        try:
            obj = prefab.copy()
            self._get_collection(parent).objects.link(obj)
            obj.parent = parent
        except (RuntimeError, ReferenceError, TypeError) as exc:
            raise RenderBackendError("could not instantiate " + repr(prefab)) from exc
        return obj

    def set_transform(self, handle, position, rotation, scale):
        try:
            handle.location = Vector(position)
            handle.rotation_mode = rotation.order
            handle.rotation_euler = rotation
            handle.scale = Vector(scale)
        except (RuntimeError, ReferenceError, TypeError) as exc:
            raise RenderBackendError("could not transform " + repr(handle)) from exc

    def reparent(self, handle, new_parent):
        try:
            handle.parent = new_parent
        except (RuntimeError, ReferenceError, TypeError) as exc:
            raise RenderBackendError("could not reparent " + repr(handle)) from exc

    def destroy(self, handle):
        try:
            bpy.data.objects.remove(handle, do_unlink=True)
        except (RuntimeError, ReferenceError, TypeError) as exc:
            raise RenderBackendError("could not remove " + repr(handle)) from exc

def gen_tree(context, axiom="F", iterations=3, location=(0.0, 0.0, 0.0), seed=None, prefab=None):
    root = make_tree_root(context, location=location)
    config = TreeConfig(axiom=axiom, iterations=iterations, prefab=prefab, parent=root)
    generator = lsystem_tree_generator(blender_renderer(context), config, uniform_angle_jitter(seed))
    generator.regenerate()
    return generator

#=============================================================================================
if __name__ == "__main__":
    gen_tree(bpy.context, "F", 3, (0, 0, 0), seed=1)
    gen_tree(bpy.context, "F", 4, (10, 0, 0), seed=2)

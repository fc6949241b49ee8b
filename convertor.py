import logging
import os
import random

import defusedxml.ElementTree
from lxml import etree

from maze_generator import CELLS_HORIZONTAL, CELLS_VERTICAL, format_maze, save_maze
from maze_layout import HORIZONTAL, VERTICAL, WallSegment, build_layout

logger = logging.getLogger(__name__)

# Pixels to metres
DEFAULT_SCALE = 0.01

WALL_MATERIALS = {HORIZONTAL: 'Gazebo/Blue', VERTICAL: 'Gazebo/Red'}
BORDER_MATERIAL = 'Gazebo/Wood'
GOAL_MATERIAL = 'Gazebo/Green'


def convert_layout_to_world(layout, world_file, wall_height=2, scale=DEFAULT_SCALE):
    sdf = etree.Element('sdf', version='1.6')
    world = etree.SubElement(sdf, 'world', name='default')
    include_sun(world)
    create_ground(world, layout.width * scale, layout.height * scale)

    for i, wall in enumerate(layout.walls):
        prefix = 'hwall' if wall.orientation == HORIZONTAL else 'vwall'
        add_wall(world, f'{prefix}_{i}', wall, scale, wall_height, WALL_MATERIALS[wall.orientation])

    for i, wall in enumerate(layout.boundary):
        add_wall(world, f'border_{i}', wall, scale, wall_height, BORDER_MATERIAL)

    add_goal(world, layout.goal, scale)

    tree = etree.ElementTree(sdf)
    tree.write(world_file, pretty_print=True, xml_declaration=True, encoding='utf-8')
    logger.info('Wrote %d walls to %s', len(layout.walls) + len(layout.boundary), world_file)


def include_sun(world):
    sun = etree.SubElement(world, 'include')
    uri = etree.SubElement(sun, 'uri')
    uri.text = 'model://sun'


def create_ground(world, ground_size_x, ground_size_y):
    ground = etree.SubElement(world, 'model', name='ground_plane')
    static = etree.SubElement(ground, 'static')
    static.text = 'true'
    link = etree.SubElement(ground, 'link', name='link')
    collision = etree.SubElement(link, 'collision', name='collision')
    geometry = etree.SubElement(collision, 'geometry')
    plane = etree.SubElement(geometry, 'plane')
    size = etree.SubElement(plane, 'size')
    size.text = f'{ground_size_x} {ground_size_y}'
    visual = etree.SubElement(link, 'visual', name='visual')
    cast_shadows = etree.SubElement(visual, 'cast_shadows')
    cast_shadows.text = 'false'
    geometry = etree.SubElement(visual, 'geometry')
    plane = etree.SubElement(geometry, 'plane')
    size = etree.SubElement(plane, 'size')
    size.text = f'{ground_size_x} {ground_size_y}'
    add_material(visual, 'Gazebo/Grey')

    # The canvas origin is the top-left corner, screen y grows downwards
    pose = etree.SubElement(ground, 'pose')
    pose.text = f'{ground_size_x / 2} {-ground_size_y / 2} 0 0 0 0'


def add_wall(world, name, wall, scale, wall_height, material):
    model = etree.SubElement(world, 'model', name=name)
    static = etree.SubElement(model, 'static')
    static.text = 'true'
    pose = etree.SubElement(model, 'pose')
    pose.text = f'{wall.center_x * scale} {-wall.center_y * scale} {wall_height / 2} 0 0 0'
    create_box(model, wall.width * scale, wall.height * scale, wall_height, material)


def add_goal(world, goal, scale):
    model = etree.SubElement(world, 'model', name='goal')
    static = etree.SubElement(model, 'static')
    static.text = 'true'
    pose = etree.SubElement(model, 'pose')
    pose.text = f'{goal.center_x * scale} {-goal.center_y * scale} 0.005 0 0 0'
    create_box(model, goal.width * scale, goal.height * scale, 0.01, GOAL_MATERIAL)


def create_box(model, width, height, depth, material):
    link = etree.SubElement(model, 'link', name='link')
    collision = etree.SubElement(link, 'collision', name='collision')
    geometry = etree.SubElement(collision, 'geometry')
    box = etree.SubElement(geometry, 'box')
    size = etree.SubElement(box, 'size')
    size.text = f'{width} {height} {depth}'
    visual = etree.SubElement(link, 'visual', name='visual')
    geometry = etree.SubElement(visual, 'geometry')
    box = etree.SubElement(geometry, 'box')
    size = etree.SubElement(box, 'size')
    size.text = f'{width} {height} {depth}'
    add_material(visual, material)


def add_material(visual, name):
    material = etree.SubElement(visual, 'material')
    script = etree.SubElement(material, 'script')
    uri = etree.SubElement(script, 'uri')
    uri.text = 'file://media/materials/scripts/gazebo.material'
    script_name = etree.SubElement(script, 'name')
    script_name.text = name


def load_walls(world_file, scale=DEFAULT_SCALE):
    """Read the inner maze walls back out of a world written by convert_layout_to_world."""
    tree = defusedxml.ElementTree.parse(world_file)
    root = tree.getroot()

    walls = []
    for model in root.iter('model'):
        name = model.get('name', '')
        if name.startswith('hwall_'):
            orientation = HORIZONTAL
        elif name.startswith('vwall_'):
            orientation = VERTICAL
        else:
            continue

        x, y = model.find('pose').text.split()[:2]
        width, height = model.find('link/collision/geometry/box/size').text.split()[:2]
        walls.append(WallSegment(
            float(x) / scale,
            -float(y) / scale,
            float(width) / scale,
            float(height) / scale,
            orientation,
        ))

    return walls


def convert_all_layouts(count, output_folder, rows=CELLS_VERTICAL, cols=CELLS_HORIZONTAL, seed=None):
    if not os.path.exists(output_folder):
        os.makedirs(output_folder)

    rng = random.Random(seed) if seed is not None else None

    written = []
    for i in range(count):
        layout = build_layout(rows, cols, rng=rng)
        base = os.path.join(output_folder, f'maze_{i+1}')
        save_maze(format_maze(layout.verticals, layout.horizontals), base + '.txt')
        convert_layout_to_world(layout, base + '.world')
        written.append(base + '.world')

    return written


if __name__ == '__main__':
    output_folder = './worlds'
    for world_file in convert_all_layouts(50, output_folder):
        print(f"Converted maze to {world_file}")

import os
import random

import pytest
from lxml import etree

from convertor import convert_all_layouts, convert_layout_to_world, load_walls
from maze_layout import build_layout


def test_world_contains_every_body(tmp_path):
    layout = build_layout(4, 5, 500, 400, rng=random.Random(2))
    world_file = str(tmp_path / 'maze.world')
    convert_layout_to_world(layout, world_file)

    root = etree.parse(world_file).getroot()
    names = [model.get('name') for model in root.iter('model')]

    assert root.tag == 'sdf'
    assert root.get('version') == '1.6'
    assert 'ground_plane' in names
    assert 'goal' in names
    assert sum(name.startswith('border_') for name in names) == 4
    assert sum(name[1:].startswith('wall_') for name in names) == len(layout.walls)


def test_load_walls_matches_layout(tmp_path):
    layout = build_layout(3, 3, 300, 300, rng=random.Random(5))
    world_file = str(tmp_path / 'maze.world')
    convert_layout_to_world(layout, world_file)

    walls = load_walls(world_file)

    assert len(walls) == len(layout.walls)
    for loaded, original in zip(walls, layout.walls):
        assert loaded.orientation == original.orientation
        assert loaded.center_x == pytest.approx(original.center_x)
        assert loaded.center_y == pytest.approx(original.center_y)
        assert loaded.width == pytest.approx(original.width)
        assert loaded.height == pytest.approx(original.height)


def test_wall_materials(tmp_path):
    layout = build_layout(2, 2, 200, 200, rng=random.Random(1))
    world_file = str(tmp_path / 'maze.world')
    convert_layout_to_world(layout, world_file)

    root = etree.parse(world_file).getroot()
    goal = root.find("world/model[@name='goal']")

    assert goal.find('link/visual/material/script/name').text == 'Gazebo/Green'
    border = root.find("world/model[@name='border_0']")
    assert border.find('link/visual/material/script/name').text == 'Gazebo/Wood'


def test_convert_all_layouts(tmp_path):
    output_folder = str(tmp_path / 'worlds')
    written = convert_all_layouts(3, output_folder, rows=4, cols=4, seed=9)

    assert len(written) == 3
    for i in range(1, 4):
        assert os.path.exists(os.path.join(output_folder, f'maze_{i}.world'))
        assert os.path.exists(os.path.join(output_folder, f'maze_{i}.txt'))


def test_convert_all_layouts_default_size(tmp_path):
    output_folder = str(tmp_path / 'worlds')
    convert_all_layouts(1, output_folder, seed=1)

    lines = (tmp_path / 'worlds' / 'maze_1.txt').read_text().splitlines()

    # Top border plus one line per row, each cell is two characters wide
    assert len(lines) == 11
    assert len(lines[1]) == 1 + 2 * 15

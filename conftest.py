import json

import pytest

from slot_generator.host import JsonScene


def block_node(name, children=(), x=0, y=0):
    return {"name": name, "x": x, "y": y, "rotation": 0, "children": list(children)}


def slot_node(footprint, x, y, rotation=0):
    return {"name": f"Slot {footprint}", "x": x, "y": y, "rotation": rotation, "children": []}


@pytest.fixture
def scene_document():
    # Position 23 sits in column 3, row 2: field origin (1400, 950)
    return {
        "nodes": [
            {
                "name": "Page",
                "x": 0,
                "y": 0,
                "children": [
                    block_node("Legend"),
                    {
                        "name": "Blocks",
                        "x": 0,
                        "y": 0,
                        "children": [
                            block_node("S:Res_Low_023", [
                                slot_node("2x2", 1410.4, 960.6),
                                {"name": "Background", "x": 1400, "y": 950, "children": []},
                                slot_node("1x2", 1500, 1000, rotation=45),
                            ]),
                            block_node("Notes"),
                            block_node("T:Ind_High_007", [
                                slot_node("1x1", 3210, 60, rotation=89.6),
                            ]),
                        ],
                    },
                ],
            }
        ]
    }


@pytest.fixture
def scene(scene_document):
    return JsonScene(scene_document)


@pytest.fixture
def scene_file(tmp_path, scene_document):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(scene_document), encoding="utf-8")
    return path

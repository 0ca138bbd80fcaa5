from housebuilder.house import House


def test_empty_house_renders_prefix_only() -> None:
    house = House()
    assert len(house) == 0
    assert house.render() == "House parts: "


def test_append_keeps_call_order_and_duplicates() -> None:
    house = House()
    for label in ["Roof", "Walls", "Roof"]:
        house.append(label)
    assert house.parts == ("Roof", "Walls", "Roof")
    assert list(house) == ["Roof", "Walls", "Roof"]
    assert house.render() == "House parts: Roof, Walls, Roof"


def test_render_has_no_side_effects() -> None:
    house = House()
    house.append("Door")
    assert house.render() == house.render()
    assert house.parts == ("Door",)


def test_equality_by_parts() -> None:
    a, b = House(), House()
    a.append("Walls")
    b.append("Walls")
    assert a == b
    b.append("Door")
    assert a != b

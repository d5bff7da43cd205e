import main


def test_main_prints_scenarios(capsys):
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "cross((-2, 10, -6), (8, -1, 2)) = Vector3(14, -44, -78)" in out
    assert "dot((4, -2, 3), (-5, 9, -1)) = -41" in out
    assert "length(Vector3(6, 10, 1)) = 11.7046999" in out
    assert "cross(unit_x, unit_y) == unit_z: True" in out
    assert "Counter-clockwise normal: Vector3(0.0, 0.0, " in out
    assert "visible=True" in out
    assert "visible=False" in out

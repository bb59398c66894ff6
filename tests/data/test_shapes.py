import numpy as np

from shollplex.data import (
    draw_ball,
    draw_disk,
    draw_segment,
    draw_star_arbor,
    generate_arbor_2d,
)


def test_draw_disk():
    """Pixels within half a pixel of the radius are filled."""
    image = np.zeros((21, 21), dtype=np.uint8)
    draw_disk(image, (12, 8), 3)

    assert image[8, 12] == 255
    assert image[8, 15] == 255
    assert image[8, 16] == 0
    assert image[5, 12] == 255
    assert image[4, 12] == 0
    # symmetric around the center
    np.testing.assert_array_equal(image[5:12, 9:16], image[5:12, 9:16][::-1, ::-1])


def test_draw_ball():
    """Test the ball is drawn around an (x, y, z) center."""
    image = np.zeros((11, 21, 21), dtype=np.uint8)
    draw_ball(image, (12, 8, 5), 3)

    assert image[5, 8, 12] == 255
    assert image[5, 8, 15] == 255
    assert image[5, 8, 16] == 0
    assert image[2, 8, 12] == 255
    assert image[1, 8, 12] == 0


def test_draw_ball_clipped():
    """Balls crossing the image border are clipped."""
    image = np.zeros((5, 10, 10), dtype=np.uint8)
    draw_ball(image, (0, 0, 0), 3)

    assert image[0, 0, 0] == 255
    assert image[3, 0, 0] == 255


def test_draw_segment():
    """Test the segment is drawn between (x, y) end points."""
    image = np.zeros((10, 10), dtype=np.uint8)
    draw_segment(image, (1, 2), (7, 2), value=3)

    np.testing.assert_array_equal(np.argwhere(image)[:, 0], np.full(7, 2))
    np.testing.assert_array_equal(np.argwhere(image)[:, 1], np.arange(1, 8))
    assert np.all(image[image > 0] == 3)


def test_draw_star_arbor(star_image):
    """The branches of the star point along the axes."""
    assert star_image.dtype == np.uint8
    assert set(np.unique(star_image)) == {0, 255}
    for x, y in [(90, 50), (50, 90), (10, 50), (50, 10)]:
        assert star_image[y, x] == 255
    assert star_image[50, 91] == 0
    assert star_image[60, 60] == 0


def test_generate_arbor_2d():
    """The arbor is a binary image centered on the soma."""
    image = generate_arbor_2d(shape=(101, 101), branch_length=20, soma_radius=3)

    assert image.shape == (101, 101)
    assert image.dtype == np.uint8
    assert set(np.unique(image)) == {0, 255}
    assert image[50, 50] == 255
    # primary branch along +x
    assert image[50, 70] == 255


def test_generate_arbor_2d_dilation():
    """Dilation thickens the branches."""
    thin = generate_arbor_2d(shape=(101, 101), branch_length=20)
    thick = generate_arbor_2d(shape=(101, 101), branch_length=20, dilation_radius=2)

    assert np.count_nonzero(thick) > np.count_nonzero(thin)
    assert np.all(thick[thin > 0] == 255)


def test_draw_star_arbor_diagonal_branches():
    """Eight branches include the diagonals."""
    image = draw_star_arbor(
        shape=(41, 41),
        center=(20, 20),
        n_branches=8,
        branch_length=10,
        soma_radius=1,
        value=7,
    )

    # the diagonal branches end at round(10 / sqrt(2)) = 7 pixels per axis
    assert image[27, 27] == 7
    assert image[13, 13] == 7
    assert image[20, 30] == 7
    assert image[25, 30] == 0

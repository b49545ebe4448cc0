import pytest

from chromakit.image import Image


def test_add_row_grows_image():
    image = Image(3)
    assert len(image) == 0
    image.add_row([1.0, 2.0, 3.0])
    image.add_row([4.0, 5.0, 6.0])
    assert len(image) == 2
    assert image.num_rows == 2
    assert image.num_columns == 3
    assert image[1] == [4.0, 5.0, 6.0]


def test_row_changes_are_kept():
    image = Image(2)
    image.add_row([1.0, 2.0])
    image.row(0)[1] = 9.0
    assert image[0] == [1.0, 9.0]


def test_short_row_is_padded():
    image = Image(3)
    image.add_row([7.0])
    assert image[0] == [7.0, 0.0, 0.0]


def test_long_row_rejected():
    image = Image(2)
    with pytest.raises(ValueError):
        image.add_row([1.0, 2.0, 3.0])


def test_rows_constructor_zero_filled():
    image = Image(4, 3)
    assert len(image) == 3
    assert all(row == [0.0] * 4 for row in (image[i] for i in range(3)))


def test_data_constructor_chunks_values():
    data = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    image = Image(2, data=data)
    assert len(image) == 3
    assert [v for i in range(len(image)) for v in image[i]] == data


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_row_index_out_of_range(index):
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.row(index)


def test_zero_columns_rejected():
    with pytest.raises(ValueError):
        Image(0)
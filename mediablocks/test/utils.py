from io import BytesIO
from typing import Union

import PIL.Image
from bs4 import BeautifulSoup
from django.core.files.images import ImageFile


class MediaBlocksTestUtils:
    @staticmethod
    def get_soup(markup: Union[str, bytes]) -> BeautifulSoup:
        # Use an empty string_containers argument so that <script>, <style>, and
        # <template> tags do not have their text ignored.
        return BeautifulSoup(markup, "html.parser", string_containers={})


def get_test_image_file(filename="test.png", colour="white", size=(640, 480)):
    f = BytesIO()
    image = PIL.Image.new("RGBA", size, colour)
    image.save(f, "PNG")
    return ImageFile(f, name=filename)

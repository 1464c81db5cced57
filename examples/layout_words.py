"""Example: lay out a handful of word boxes and print their positions."""

from tagcloud_layout import Point, Size, SpiralPacker, summarize

WORDS = {
    "python": Size(120, 40),
    "layout": Size(90, 30),
    "spiral": Size(80, 30),
    "cloud": Size(70, 28),
    "tag": Size(40, 20),
    "rectangle": Size(110, 22),
    "packing": Size(75, 18),
}


def main() -> None:
    center = Point(300, 300)
    packer = SpiralPacker(center)
    for word, size in WORDS.items():
        rect = packer.place(size)
        print(f"{word:>10}: ({rect.left}, {rect.top}) {rect.width}x{rect.height}")

    stats = summarize(packer.rectangles, center)
    print(f"Radius: {stats.radius:.1f}")
    print(f"Density: {stats.density:.3f}")
    print("Spiral parameter:", packer.spiral_parameter)


if __name__ == "__main__":
    main()

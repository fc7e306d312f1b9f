import numpy as np
from PIL import Image
import matplotlib.pyplot as plt

from circle import circle_points, draw_circle_int

BACKGROUND = " "
FOREGROUND = "#"
CIRCLE_COLOR = (255, 255, 255, 255)

def circle_text(radius):
	# row 0 is y = radius, column 0 is x = -radius
	size = 2 * radius + 1
	rows = [[BACKGROUND] * size for _ in range(size)]

	def put_pixel(x, y):
		rows[radius - y][x + radius] = FOREGROUND

	draw_circle_int(radius, put_pixel)
	return "".join("".join(row) + "\n" for row in rows)

def draw_circle_text(radius, writer):
	writer.write(circle_text(radius))

def circle_array(radius, color=CIRCLE_COLOR):
	size = 2 * radius + 1
	arr = np.zeros((size, size, 4), dtype=np.uint8)

	def put_pixel(x, y):
		arr[radius - y, x + radius] = color

	draw_circle_int(radius, put_pixel)
	return arr

def circle_image(radius, color=CIRCLE_COLOR):
	return Image.fromarray(circle_array(radius, color))

def draw_circle_image(radius, writer, format="PNG"):
	"""Encode the circle of the given radius into a binary stream.

	Pillow errors (OSError, ValueError, KeyError for an unknown format) are
	left to the caller.
	"""
	circle_image(radius).save(writer, format=format)

def plot_circle(radius, plot_path):
	points = np.array(sorted(circle_points(radius)))

	fig = plt.figure(figsize=(6, 6))
	t = np.linspace(0, 2 * np.pi, 800)
	plt.plot(radius * np.cos(t), radius * np.sin(t))
	plt.scatter(points[:, 0], points[:, 1], s=25)
	plt.gca().set_aspect("equal", adjustable="box")
	plt.grid(True)
	plt.xlim(-radius - 1, radius + 1)
	plt.ylim(-radius - 1, radius + 1)
	plt.title(f"Circle pixels (r={radius}, {len(points)} points)")
	plt.savefig(plot_path)
	plt.close(fig)

import math, time

DEFAULT_RADIUS = 3

def reflect(x, y, put_pixel):
	put_pixel(x, y)
	put_pixel(y, x)
	put_pixel(-x, y)
	put_pixel(-y, x)
	put_pixel(x, -y)
	put_pixel(y, -x)
	put_pixel(-x, -y)
	put_pixel(-y, -x)

def iter_octant(radius):
	"""Yield the (x, y) points of the arc 0 <= x <= y, integer math only."""
	x = 0
	y = radius
	xsq = 0
	rsq = radius * radius
	ysq = rsq
	while x <= y:
		yield x, y
		# (x+1)^2 = x^2 + 2x + 1
		xsq = xsq + 2 * x + 1
		x += 1
		# (y-1)^2 = y^2 - 2y + 1
		y1sq = ysq - 2 * y + 1
		# keep y or take y-1, whichever is closer to the circle; ties go to y-1
		a = xsq + ysq
		b = xsq + y1sq
		if a - rsq >= rsq - b:
			y -= 1
			ysq = y1sq

def draw_circle_int(radius, put_pixel):
	for x, y in iter_octant(radius):
		reflect(x, y, put_pixel)

def draw_circle_sqrt(radius, put_pixel):
	# reference method, y = sqrt(r^2 - x^2) per column
	rsq = radius * radius
	for x in range(radius + 1):
		# r^2 - x^2 is an integer so its root is never exactly n.5
		y = int(round(math.sqrt(rsq - x * x)))
		reflect(x, y, put_pixel)

methods = {
	"int": draw_circle_int,
	"sqrt": draw_circle_sqrt,
}

def circle_points(radius, method="int"):
	if method not in methods:
		raise ValueError(f"unknown method {method!r}, expected one of {sorted(methods)}")
	points = set()
	methods[method](radius, lambda x, y: points.add((x, y)))
	return points

def benchmark(radius=100, rounds=1000):
	timings = {}
	noop = lambda x, y: None
	for name in ["sqrt", "int"]:
		draw = methods[name]
		st = time.perf_counter()
		for _ in range(rounds):
			draw(radius, noop)
		timings[name] = time.perf_counter() - st
	return timings

if __name__ == "__main__":
	for n in range(11):
		print(f"{n = }")
		print(sorted(circle_points(n)))

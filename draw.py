"""Draw circles with integer arithmetic only.

Usage:
    draw-circle -r 10                 # text circle on stdout
    draw-circle -r 10 -png circle.png
    draw-circle -r 10 -plot plot.png
    draw-circle -r 100 -bench 1000
    draw-circle -http :8080           # then http://localhost:8080?r=42
"""

import argparse
import logging
import sys

from circle import DEFAULT_RADIUS, benchmark
from utils import draw_circle_text, draw_circle_image, plot_circle

logger = logging.getLogger("circle.draw")

def radius_arg(value):
	radius = int(value)
	if radius < 0:
		raise argparse.ArgumentTypeError(f"radius must be >= 0, got {radius}")
	return radius

def parse_address(address):
	host, _, port = address.rpartition(":")
	# [::1]:8080
	if host.startswith("[") and host.endswith("]"):
		host = host[1:-1]
	return host or "0.0.0.0", int(port)

def build_parser():
	parser = argparse.ArgumentParser(prog="draw-circle", description="Draw circles using the Bresenham circle algorithm")
	parser.add_argument("-r", type=radius_arg, default=DEFAULT_RADIUS, help="radius of circle")
	parser.add_argument("-http", metavar="ADDRESS", default="", help="run HTTP server on ADDRESS (e.g., :8080) to serve circle images")
	parser.add_argument("-png", metavar="PATH", help="write the circle as a PNG image instead of text")
	parser.add_argument("-plot", metavar="PATH", help="save a plot of the pixels against the true circle")
	parser.add_argument("-bench", metavar="ROUNDS", type=int, help="time the sqrt and integer methods over ROUNDS runs")
	return parser

def serve(address):
	from server import app

	host, port = parse_address(address)
	logger.info("listening on %s", address)
	app.run(host=host, port=port)

def main(argv=None):
	logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
	parser = build_parser()
	args = parser.parse_args(argv)
	if args.bench is not None and args.bench <= 0:
		parser.error("-bench needs a positive number of rounds")

	if args.http:
		try:
			parse_address(args.http)
		except ValueError:
			parser.error(f"invalid address {args.http!r}, expected host:port")
		serve(args.http)
		return 0

	if args.bench is not None:
		for name, seconds in benchmark(args.r, args.bench).items():
			print(f"{name}: {seconds / args.bench * 1e6:.2f} us/op ({args.bench} rounds)")
		return 0

	if args.plot:
		plot_circle(args.r, args.plot)
		logger.info("saved plot to %s", args.plot)

	if args.png:
		with open(args.png, "wb") as f:
			draw_circle_image(args.r, f)
		logger.info("saved image to %s", args.png)
	elif not args.plot:
		draw_circle_text(args.r, sys.stdout)
		sys.stdout.flush()
	return 0

if __name__ == "__main__":
	sys.exit(main())

"""Flask app serving circle images.

Example: GET /?r=42 returns an 85x85 PNG with the circle in white pixels.
"""

import io
import logging
import re

from flask import Flask, Response, current_app, request

from circle import DEFAULT_RADIUS
from utils import draw_circle_image

logger = logging.getLogger("circle.server")

# largest value strconv.Atoi accepts on 64-bit hosts
MAX_RADIUS = 2 ** 63 - 1

RADIUS_HINT = "radius must be a positive integer, e.g., ?r=42"

# optional sign then ASCII digits, nothing else
_radius_re = re.compile(r"[+-]?[0-9]+")

def parse_radius(value, default):
	"""Return the radius from a query value, or None when it is invalid."""
	if not value:
		return default
	if not _radius_re.fullmatch(value):
		return None
	radius = int(value)
	if radius < 0 or radius > MAX_RADIUS:
		return None
	return radius

def create_app(config=None):
	app = Flask(__name__)
	app.config["DEFAULT_RADIUS"] = DEFAULT_RADIUS
	app.config["IMAGE_FORMAT"] = "PNG"
	app.config.from_prefixed_env("CIRCLE")
	if config:
		app.config.update(config)

	app.add_url_rule("/", view_func=draw_circle, methods=["GET"])
	return app

def draw_circle():
	radius = parse_radius(request.args.get("r", ""), current_app.config["DEFAULT_RADIUS"])
	if radius is None:
		return Response(RADIUS_HINT, status=400, mimetype="text/plain")

	logger.info("drawing circle of radius %d", radius)
	image_format = current_app.config["IMAGE_FORMAT"]
	buf = io.BytesIO()
	try:
		draw_circle_image(radius, buf, format=image_format)
	except (OSError, ValueError, KeyError) as e:
		logger.error("error encoding image: %s", e)
		return Response(f"error encoding image: {e}", status=500, mimetype="text/plain")

	return Response(buf.getvalue(), status=200, mimetype=f"image/{image_format.lower()}")

app = create_app()

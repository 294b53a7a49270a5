import os
from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("table_grid", os.path.join("renderer", "templates")),
    autoescape=select_autoescape(["html", "xml"]),
)

table_css_template = env.get_template("table.css")

standalone_table_template = env.get_template("standalone_table.html")

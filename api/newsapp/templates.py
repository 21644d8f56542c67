from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
import pathlib

TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"
REQUIRED = ("index.html",)

def load_templates(directory: pathlib.Path = TEMPLATE_DIR) -> Environment:
    """Build the Jinja environment and resolve every page up front so a missing file fails at startup."""
    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape()
    )
    for name in REQUIRED:
        env.get_template(name)
    return env

def render(env: Environment, name: str, ctx: dict, status_code: int = 200) -> HTMLResponse:
    tmpl = env.get_template(name)
    return HTMLResponse(tmpl.render(**ctx), status_code=status_code)

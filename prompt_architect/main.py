import typer
from pydantic import ValidationError

from prompt_architect.errors import PromptArchitectError
from prompt_architect.factory import create_enhancer
from prompt_architect.models.form import EnhancementRequest

app = typer.Typer(help="Turn a rough idea into a detailed JSON specification prompt.")


@app.command()
def gui():
    """
    Open the Prompt Architect form.
    """
    from prompt_architect.gui.form_window import run_gui

    run_gui(create_enhancer())


@app.command()
def enhance(
    idea: str = typer.Argument(..., help="Your idea, e.g. 'a minimalist portfolio site'"),
    context: str = typer.Option("", "--context", "-c", help="Optional project name or context"),
):
    """
    Enhance a single idea and print the generated specification.
    """
    try:
        request = EnhancementRequest(idea_text=idea, context_text=context)
    except ValidationError:
        typer.echo("Idea must not be empty.", err=True)
        raise typer.Exit(code=1)

    try:
        result = create_enhancer().enhance(request.composed_prompt)
    except PromptArchitectError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(result)


if __name__ == "__main__":
    app()

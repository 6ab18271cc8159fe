"""Plain text and Markdown export"""

from pathlib import Path

from brokentimeline.models import ComposedStory

FORMATS = ("text", "markdown")


class StoryExporter:
    """Exports composed stories to text or Markdown"""

    def export(self, story: ComposedStory, fmt: str = "text") -> str:
        """
        Render a story

        Args:
            story: Composed story to export
            fmt: "text" for the flat full text, "markdown" for sectioned output

        Returns:
            Rendered string
        """
        if fmt == "text":
            return story.full_text
        if fmt == "markdown":
            return self._to_markdown(story)
        raise ValueError(f"Unknown export format: {fmt}")

    def _to_markdown(self, story: ComposedStory) -> str:
        lines = [f"# {story.inputs.title}", ""]

        for segment in story.segments:
            lines.append(f"## {segment.title}")
            lines.append("")
            lines.append(f"*{segment.label}*")
            lines.append("")
            lines.append(segment.body)
            lines.append("")

        return "\n".join(lines)

    def export_to_file(self, story: ComposedStory, file_path: Path, fmt: str = "text"):
        """
        Export a story to a file

        Args:
            story: Composed story to export
            file_path: Path to output file
            fmt: Export format
        """
        content = self.export(story, fmt)

        # Ensure directory exists
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)

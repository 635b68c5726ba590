"""Pydantic configuration models for xpost2md."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class SelectorConfig(BaseModel):
    """CSS selectors and class names for the X.com page structure (2026 markup)."""

    post: str = Field('article[role="article"]', description="Wrapper of one post (tweet or reply)")
    post_text: str = Field('[data-testid="tweetText"]', description="Text body of a post")
    user_name: str = Field('[data-testid="User-Name"]', description="Author name/handle block")
    photo: str = Field('[data-testid="tweetPhoto"]', description="Photo container of a post")
    article_title: str = Field('[data-testid="twitter-article-title"]', description="Article title")
    article_rich_text: str = Field(
        '[data-testid="twitterArticleRichTextView"]',
        description="Article body container",
    )
    article_draft_content: str = Field(
        '[data-testid="longformRichTextComponent"]',
        description="Draft.js content root inside the article body",
    )
    draft_contents: str = Field("[data-contents]", description="Node whose children are Draft blocks")
    code_block: str = Field('[data-testid="markdown-code-block"]', description="Article code block")
    code_language_label: str = Field('[class*="r-1aiqnjv"]', description="Label showing a code block's language")
    separator: str = Field('[role="separator"]', description="Article horizontal rule")
    header_one_class: str = Field("longform-header-one", description="Class of level 1 headings")
    header_two_class: str = Field("longform-header-two", description="Class of level 2 headings")
    unordered_item_class: str = Field("longform-unordered-list-item", description="Class of bullet items")
    ordered_item_class: str = Field("longform-ordered-list-item", description="Class of numbered items")
    time: str = Field("time", description="Timestamp element inside a post")

    model_config = {"extra": "forbid", "frozen": True}


class RenderConfig(BaseModel):
    """Configuration for Markdown rendering of posts and articles."""

    site_url: str = Field("https://x.com", description="Canonical site used to resolve relative links")
    short_link_host: str = Field("t.co", description="Link shortener host whose links are resolved")
    media_host: str = Field("pbs.twimg.com", description="Image CDN host whose URLs are upscaled")
    emoji_hosts: list[str] = Field(
        default_factory=lambda: ["twimg.com/emoji", "abs-0.twimg.com"],
        description="Image src fragments identifying emoji sprites",
    )
    image_size: str = Field("large", pattern=r"^\w+$", description="Size variant requested from the CDN")
    max_inline_depth: int = Field(200, ge=1, description="Recursion ceiling for inline rendering")
    remove_selectors: list[str] = Field(
        default_factory=list,
        description="Extra CSS selectors stripped before rendering (extends defaults)",
    )

    model_config = {"extra": "forbid", "frozen": True}


class OutputConfig(BaseModel):
    """Configuration for writing Markdown files."""

    directory: Path = Field(Path("."), description="Directory for saved Markdown files")
    frontmatter: bool = Field(False, description="Prepend YAML frontmatter to saved files")
    overwrite: bool = Field(True, description="Replace an existing file with the same name")

    model_config = {"extra": "forbid"}


class Xpost2mdConfig(BaseModel):
    """
    Root configuration model for xpost2md.

    Example:
        config = Xpost2mdConfig(
            render=RenderConfig(image_size="orig"),
            output=OutputConfig(directory=Path("./notes")),
        )

    YAML format:
        render:
          image_size: orig
        output:
          directory: ./notes
          frontmatter: true
    """

    selectors: SelectorConfig = Field(default_factory=SelectorConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "Xpost2mdConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "Xpost2mdConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text(encoding="utf-8"))

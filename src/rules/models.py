from pydantic import BaseModel, Field, model_validator


class SiteSection(BaseModel):
    url: str
    media_url: str = "/media"
    home_slug: str = "home"


class LanguageRules(BaseModel):
    code: str
    slug: str | None = None
    url: str | None = None
    home_slug: str | None = None
    default: bool = False

    @property
    def url_slug(self) -> str:
        return (self.slug or self.code).strip("/")


class SiteRules(BaseModel):
    site: SiteSection
    languages: list[LanguageRules] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_languages(self) -> "SiteRules":
        codes = [lang.code for lang in self.languages]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise ValueError(f"Duplicate language codes: {', '.join(duplicates)}")
        if sum(1 for lang in self.languages if lang.default) > 1:
            raise ValueError("Only one language can be the default")
        return self

    def is_multilang(self) -> bool:
        return len(self.languages) > 0

    def get_language(self, code: str) -> LanguageRules | None:
        return next((lang for lang in self.languages if lang.code == code), None)

    def default_language(self) -> LanguageRules | None:
        if not self.languages:
            return None
        return next((lang for lang in self.languages if lang.default), self.languages[0])

    def site_url_for(self, code: str) -> str:
        """Canonical URL of a language, falling back to the site URL."""
        language = self.get_language(code)
        if language is not None and language.url:
            return language.url
        return self.site.url

    def home_slug_for(self, code: str) -> str:
        language = self.get_language(code)
        if language is not None and language.home_slug:
            return language.home_slug
        return self.site.home_slug

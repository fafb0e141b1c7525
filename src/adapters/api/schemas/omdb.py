"""Reponse de l'API OMDb (recherche par ID IMDb)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OMDbResponse(BaseModel):
    """
    Reponse de GET /?i={imdb_id}.

    OMDb repond toujours 200 : l'echec est signale par Response="False"
    et un message dans Error. Les notes sont des chaines ("8.7", "N/A").
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response: str = Field(alias="Response")
    error: Optional[str] = Field(default=None, alias="Error")
    title: Optional[str] = Field(default=None, alias="Title")
    year: Optional[str] = Field(default=None, alias="Year")
    imdb_id: Optional[str] = Field(default=None, alias="imdbID")
    imdb_rating: Optional[str] = Field(default=None, alias="imdbRating")
    imdb_votes: Optional[str] = Field(default=None, alias="imdbVotes")

    @property
    def found(self) -> bool:
        """OMDb a trouve le titre."""
        return self.response.strip().lower() == "true"

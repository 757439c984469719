from pydantic import AliasChoices, BaseModel, ConfigDict, Field

ANSWER_SCALE_MIN = 0
ANSWER_SCALE_MAX = 4


class Answer(BaseModel):
    """
    A single answered question of one questionnaire variant.

    Accepts the storage field name ``response_value`` as an alias of ``value``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question_number: int = Field(
        ...,
        ge=1,
        description="Question number within the questionnaire variant"
    )

    value: int = Field(
        ...,
        ge=ANSWER_SCALE_MIN,
        le=ANSWER_SCALE_MAX,
        validation_alias=AliasChoices("value", "response_value"),
        description="Scored answer value on the 0-4 scale"
    )

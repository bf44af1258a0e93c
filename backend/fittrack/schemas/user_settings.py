from pydantic import BaseModel, ConfigDict, Field


class UserSettingsRead(BaseModel):
    daily_calorie_goal: int
    weight_measurement_interval: int

    model_config = ConfigDict(from_attributes=True)


class CalorieGoalUpdate(BaseModel):
    daily_calorie_goal: int = Field(gt=0)


class WeightIntervalUpdate(BaseModel):
    weight_measurement_interval: int = Field(gt=0)

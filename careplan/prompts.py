# survey key -> label shown to the model, in the order the survey asks them
SURVEY_FIELDS = [
    ("hair_type", "Hair Type"),
    ("hair_texture", "Hair Texture"),
    ("porosity", "Hair Porosity"),
    ("scalp_condition", "Scalp Condition"),
    ("product_use", "Product Use"),
    ("styling_habits", "Styling Habits"),
    ("hair_goals", "Hair Goals"),
    ("lifestyle", "Lifestyle"),
]

CARE_PLAN_PROMPT = """
You are a professional hair care specialist. Based on the following survey responses, generate a JSON response like this:

```json
{{
  "ingredients": [
    {{ "name": "Ingredient 1", "howToUse": "Instructions for Ingredient 1" }}
  ],
  "washFrequency": "e.g., 2-3 times/week",
  "tips": ["Tip 1", "Tip 2"],
  "resources": [{{"name": "Site Name", "type": "Website"}}]
}}
```

Survey:
{survey}
"""


def build_care_plan_prompt(survey_data: dict) -> str:
    """Render survey answers into the care plan prompt. Missing answers are left blank."""
    lines = []
    for key, label in SURVEY_FIELDS:
        value = survey_data.get(key)
        lines.append(f"- {label}: {'' if value is None else value}")
    return CARE_PLAN_PROMPT.format(survey="\n".join(lines))

BREAKS_AMOUNT = 6

LANGUAGE_ATTRIBUTES = [
    "Arabic",
    "Chinese",
    "French",
    "German",
    "Korean",
    "Other",
    "Other_Asia",
    "Other_Indo",
    "Russian",
    "Spanish",
    "Tagalog",
    "Vietnamese",
    "Total_pop",
]

HEALTH_METRICS = [
    "Lack of health insurance crude prevalence (%)",
    "Binge drinking crude prevalence (%)",
    "Current smoking crude prevalence (%)",
    "Physical inactivity crude prevalence (%)",
    "Sleep <7 hours crude prevalence (%)",
    "Current asthma crude prevalence (%)",
    "High blood pressure crude prevalence (%)",
    "Cancer (except skin) crude prevalence (%)",
    "Cholesterol screening crude prevalence (%)",
    "Chronic kidney disease crude prevalence (%)",
    "Arthritis crude prevalence (%)",
    "Coronary heart disease crude prevalence (%)",
    "Diabetes crude prevalence (%)",
    "Obesity crude prevalence (%)",
    "Stroke crude prevalence (%)",
    "Annual checkup crude prevalence (%)",
    "Dental visit crude prevalence (%)",
    "Mammography use crude prevalence (%)",
    "Cervical cancer screening crude prevalence (%)",
    "Colorectal cancer screening crude prevalence (%)",
    "Depression crude prevalence (%)",
    "Frequent mental health distress crude prevalence (%)",
    "Frequent physical health distress crude prevalence (%)",
    "Fair or poor health crude prevalence (%)",
    "Any disability crude prevalence (%)",
    "Hearing disability crude prevalence (%)",
    "Vision disability crude prevalence (%)",
    "Cognitive disability crude prevalence (%)",
    "Mobility disability crude prevalence (%)",
    "Self-care disability crude prevalence (%)",
    "Independent living disability crude prevalence (%)",
]

# NYC borough names as they appear in tract properties
BOROUGHS = ["Bronx", "Brooklyn", "Manhattan", "Queens", "Staten Island"]

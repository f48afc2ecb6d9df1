# config.py

# Язык подписей знаков зодиака (ключ в zodiac.LABEL_TABLES)
LABEL_LANGUAGE = "zh"

# Формат даты рождения во входных строках
DATE_FORMAT = "%Y-%m-%d"

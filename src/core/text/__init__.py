"""
Текстовые формы дробей.

- parser: грамматика `N`, `N/D`, `W N/D`
- formatter: каноническое представление "W N/D" / "N/D"
- stream_io: построчное чтение и запись через текстовые потоки
"""

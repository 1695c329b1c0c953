import sys
import os

# Добавляем корень проекта в путь поиска модулей
current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.append(current_dir)

from handvolume.__main__ import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))

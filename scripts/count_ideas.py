# scripts/count_ideas.py

from idea_roulette.config import DATA_DIR
from idea_roulette.ideas.loader import ContentLoader


def main():
    tree = ContentLoader(DATA_DIR).load_all()
    for category, subs in tree.items():
        for sub, ideas in subs.items():
            marker = "⚠" if not ideas else "✅"
            print(f"{marker} {category} > {sub}: {len(ideas)} idea(s)")

if __name__ == "__main__":
    main()

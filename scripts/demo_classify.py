"""
Demo: push a few articles through the dashboard's JSON API.
Shows success, the empty-input rejection, and whatever the classifier answers.

Usage: python scripts/demo_classify.py
  (requires the dashboard on localhost:8000 and the classifier on localhost:5000)
"""
import requests
import sys

# Force UTF-8 output for Windows to support Ge'ez script
sys.stdout.reconfigure(encoding='utf-8')

API = "http://127.0.0.1:8000"

SAMPLES = [
    ("politics",   "የኢትዮጵያ ፓርላማ አዲሱን የበጀት ረቂቅ አዋጅ ዛሬ በሙሉ ድምፅ አጸደቀ።"),
    ("sports",     "የኢትዮጵያ ብሔራዊ ቡድን ትናንት በተደረገው የእግር ኳስ ጨዋታ ሁለት ለአንድ አሸነፈ።"),
    ("business",   "የብሔራዊ ባንክ የውጭ ምንዛሪ ተመን ላይ አዲስ መመሪያ አወጣ።"),
    ("health",     "የጤና ሚኒስቴር በሀገር አቀፍ ደረጃ የክትባት ዘመቻ መጀመሩን አስታወቀ።"),
    ("(empty)",    "   "),
]


def main():
    try:
        r = requests.get(f"{API}/health", timeout=3)
        r.raise_for_status()
    except Exception as e:
        print(f"❌ Dashboard not reachable at {API}: {e}")
        print("   Start it with: python scripts/run_dashboard.py")
        sys.exit(1)

    health = r.json()
    print("=" * 72)
    print("DEMO: Amharic News Classification")
    print("=" * 72)
    print(f"  Classifier: {health['classifier_url']}")
    print()

    print(f"{'Expected':<12s} {'Status':<9s} {'Category':<16s} {'Conf':>6s}  Text Preview")
    print("─" * 72)

    for expected, text in SAMPLES:
        r = requests.post(f"{API}/api/classify", json={"text": text}, timeout=60)
        state = r.json()["state"]
        if state["status"] == "success":
            result = state["result"]
            print(f"{expected:<12s} {'success':<9s} {result['category']:<16s} {result['confidence']:>5.1%}  {text[:30]}")
        else:
            print(f"{expected:<12s} {state['status']:<9s} {state.get('message', '')}")

    print("\n  Done.\n")


if __name__ == '__main__':
    main()

# simulator.py
import os, time, requests, random

BASE = os.getenv("XC_BASE_URL", "http://127.0.0.1:8000")
TOKEN = os.getenv("ENTRY_API_TOKEN", "")
HEADERS = {"Authorization": f"Token {TOKEN}"} if TOKEN else {}
HOUSES = ['Sheaffe', 'Garran', 'Burgmann', 'Garnsey', 'Hay',
          'Blaxland', 'Edwards', 'Middelton', 'Eddison', 'Jones']
NAMES = ['Alex', 'Sam', 'Jordan', 'Riley', 'Casey', 'Morgan', 'Taylor', 'Jamie']

def active_event_id():
    resp = requests.get(f"{BASE}/api/events/active/", timeout=5)
    event = resp.json().get("event")
    if event:
        return event["id"]
    # nothing running: start one
    resp = requests.post(f"{BASE}/api/events/", json={"division": "Girls", "distance": "3km", "age_group": "14"}, headers=HEADERS, timeout=5)
    return resp.json()["event"]["id"]

def finish(event_id, elapsed):
    # elapsed in hundredths, a little slower each runner
    payload = {
        'runner_name': f"{random.choice(NAMES)} {random.randint(1, 99)}",
        'house': random.choice(HOUSES),
        'minutes': elapsed // 6000,
        'seconds': elapsed // 100 % 60,
        'milliseconds': elapsed % 100,
    }
    try:
        resp = requests.post(f"{BASE}/api/events/{event_id}/results/", json=payload, headers=HEADERS, timeout=5)
        print("POST", payload, resp.status_code, resp.text)
    except Exception as e:
        print("ERR", e)

if __name__ == "__main__":
    event_id = active_event_id()
    elapsed = 10 * 6000 + random.randint(0, 3000)
    while True:
        elapsed += random.randint(50, 1500)
        finish(event_id, elapsed)
        time.sleep(2)

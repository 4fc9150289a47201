import requests, json, sys

prompt = "a tricky icy level with lots of moving platforms and a fast thief"
if len(sys.argv) > 1:
    prompt = " ".join(sys.argv[1:])

resp = requests.post("http://127.0.0.1:8000/from_prompt", json={"prompt": prompt}, timeout=60)
print(json.dumps(resp.json(), indent=2))

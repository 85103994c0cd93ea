"""
Web page for the worker dashboard
"""

from html import escape

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4"


def create_dashboard_html(api_url: str) -> str:
    """Create HTML page for the dashboard"""
    return f"""
<!DOCTYPE html>
<html>
<head>
    <title>MGNREGA Worker Dashboard</title>
    <script src="{CHART_JS_URL}"></script>
    <style>
        body {{
            font-family: Poppins, Arial, sans-serif;
            margin: 20px;
            background-color: #f1f8e9;
            color: #333;
        }}
        .container {{
            max-width: 1000px;
            margin: 0 auto;
        }}
        .header {{
            text-align: center;
            background-color: #2E8B57;
            color: white;
            padding: 20px;
            border-radius: 12px;
            margin-bottom: 30px;
        }}
        .section {{
            text-align: center;
            margin-bottom: 30px;
        }}
        input, select {{
            margin-right: 10px;
            padding: 10px;
            border-radius: 8px;
            border: 1px solid #ccc;
        }}
        .btn {{
            padding: 10px 20px;
            border: none;
            border-radius: 8px;
            cursor: pointer;
            color: white;
        }}
        .btn-primary {{
            background-color: #4CAF50;
            font-weight: bold;
        }}
        .btn-danger {{
            background-color: #e74c3c;
            padding: 6px 14px;
        }}
        .btn:hover {{
            opacity: 0.8;
        }}
        table {{
            margin: 0 auto;
            border-collapse: collapse;
            width: 70%;
            background: white;
        }}
        thead {{
            background-color: #2196F3;
            color: white;
        }}
        th, td {{
            padding: 10px;
            border-bottom: 1px solid #ddd;
        }}
        .chart-box {{
            width: 70%;
            margin: 0 auto;
            background: white;
            border-radius: 12px;
            padding: 20px;
        }}
        footer {{
            text-align: center;
            margin-top: 60px;
            color: #555;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>🌾 MGNREGA Worker Dashboard</h1>
            <p>Empowering Rural India through Transparency and Simplicity</p>
        </div>

        <div class="section">
            <input id="name" type="text" placeholder="👷 Enter worker name" oninput="saveDraft()">
            <input id="village" type="text" placeholder="🏡 Enter village name" oninput="saveDraft()">
            <button class="btn btn-primary" onclick="addWorker()">➕ Add Worker</button>
        </div>

        <div class="section" id="workers">
            <p>Loading workers...</p>
        </div>

        <div class="section">
            <h2>📍 District Performance Overview</h2>
            <select id="district" onchange="selectDistrict(this.value)"></select>
            <div class="chart-box">
                <canvas id="chart"></canvas>
            </div>
        </div>

        <footer>
            <p>🌿 Designed for Rural India | Data from {escape(api_url)}</p>
        </footer>
    </div>

    <script>
        let chart = null;
        let ws = null;

        function cell(text) {{
            const td = document.createElement('td');
            td.textContent = text;
            return td;
        }}

        function renderWorkers(state) {{
            const box = document.getElementById('workers');
            box.replaceChildren();
            if (state.status_message) {{
                const p = document.createElement('p');
                p.textContent = state.status_message;
                box.appendChild(p);
                return;
            }}
            const table = document.createElement('table');
            const head = table.createTHead().insertRow();
            for (const title of ['👷 Name', '🏡 Village', '⚙️ Action']) {{
                const th = document.createElement('th');
                th.textContent = title;
                head.appendChild(th);
            }}
            const body = table.createTBody();
            for (const worker of state.workers) {{
                const row = body.insertRow();
                row.appendChild(cell(worker.name));
                row.appendChild(cell(worker.village));
                const button = document.createElement('button');
                button.className = 'btn btn-danger';
                button.textContent = '❌ Delete';
                button.dataset.id = worker._id;
                button.addEventListener('click', () => deleteWorker(button.dataset.id));
                const action = document.createElement('td');
                action.appendChild(button);
                row.appendChild(action);
            }}
            box.appendChild(table);
        }}

        function renderDistricts(state) {{
            const select = document.getElementById('district');
            if (select.options.length === 0) {{
                for (const name of state.districts) {{
                    select.add(new Option(name, name));
                }}
            }}
            select.value = state.district;
        }}

        async function refreshState() {{
            const response = await fetch('/api/state');
            const state = await response.json();
            renderWorkers(state);
            renderDistricts(state);
        }}

        async function refreshChart() {{
            const response = await fetch('/api/chart');
            const config = await response.json();
            if (chart) {{
                chart.data = config.data;
                chart.options = config.options;
                chart.update();
            }} else {{
                chart = new Chart(document.getElementById('chart'), {{
                    type: 'bar',
                    data: config.data,
                    options: config.options,
                }});
            }}
        }}

        async function saveDraft() {{
            await fetch('/api/draft', {{
                method: 'PUT',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify({{
                    name: document.getElementById('name').value,
                    village: document.getElementById('village').value,
                }}),
            }});
        }}

        async function addWorker() {{
            try {{
                const response = await fetch('/api/workers', {{
                    method: 'POST',
                    headers: {{ 'Content-Type': 'application/json' }},
                    body: JSON.stringify({{
                        name: document.getElementById('name').value,
                        village: document.getElementById('village').value,
                    }}),
                }});
                const result = await response.json();
                if (!response.ok) {{
                    alert(result.error.message);
                    return;
                }}
                document.getElementById('name').value = '';
                document.getElementById('village').value = '';
                await refreshState();
            }} catch (error) {{
                console.error('Error adding worker:', error);
                alert('❌ Failed to add worker. Please try again.');
            }}
        }}

        async function deleteWorker(id) {{
            try {{
                const response = await fetch('/api/workers/' + encodeURIComponent(id), {{
                    method: 'DELETE',
                }});
                if (!response.ok) {{
                    const result = await response.json();
                    alert(result.error.message);
                    return;
                }}
                await refreshState();
            }} catch (error) {{
                console.error('Error deleting worker:', error);
                alert('❌ Failed to delete worker. Please try again.');
            }}
        }}

        async function selectDistrict(name) {{
            await fetch('/api/district', {{
                method: 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify({{ district: name }}),
            }});
            await refreshChart();
        }}

        function connectWebSocket() {{
            const scheme = location.protocol === 'https:' ? 'wss://' : 'ws://';
            ws = new WebSocket(scheme + location.host + '/ws');

            ws.onmessage = function(event) {{
                const state = JSON.parse(event.data);
                renderWorkers(state);
                renderDistricts(state);
            }};

            ws.onclose = function() {{
                // Reconnect after 5 seconds
                setTimeout(connectWebSocket, 5000);
            }};
        }}

        // Initialize dashboard
        document.addEventListener('DOMContentLoaded', function() {{
            refreshState();
            refreshChart();
            connectWebSocket();
        }});
    </script>
</body>
</html>
"""


def add_dashboard_route(app: FastAPI, api_url: str):
    """Add dashboard route to FastAPI app"""

    @app.get("/dashboard", response_class=HTMLResponse)
    async def dashboard():
        """Worker dashboard page"""
        return create_dashboard_html(api_url)

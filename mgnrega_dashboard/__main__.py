from mgnrega_dashboard.main import main

main()

from wheelspin.main import main

main()

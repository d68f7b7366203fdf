"""Order domain - checkout order log"""

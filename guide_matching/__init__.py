"""Guide/traveler matching: compatibility scores, grades and ranked recommendations."""
